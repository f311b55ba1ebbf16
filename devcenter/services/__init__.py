"""
Services for devcenter.

result_parser normalizes Dev Center responses, authentication obtains the
bearer token, and registration/ runs the branch and commit registration.
"""
