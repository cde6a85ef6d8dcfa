"""
Office Portal
Dashboard over the business-administration REST backend
"""
