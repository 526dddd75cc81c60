"""Seven consecutive days of a week aligned to a configurable start day"""
