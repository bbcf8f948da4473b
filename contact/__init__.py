"""
Contact app: the public contact form and the admin inbox that answers it
by email.
"""
