"""
Use Cases

- auth/: Signup, signin, token rotation and the password reset flow
- users/: Profile of the authenticated user
"""
