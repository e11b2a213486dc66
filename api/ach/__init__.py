"""
ACH (air changes per hour) records: `/ach` CRUD endpoints.
"""
