"""Value objects of the week model"""
