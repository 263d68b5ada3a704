"""
Core domain logic.

Exception hierarchy, response evaluation and Lambda utilities.
"""
