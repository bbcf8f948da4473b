"""
Analytics app: headline numbers for the admin dashboard.
"""
