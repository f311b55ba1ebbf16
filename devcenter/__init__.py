"""
devcenter - Dev Center registration client.

Authenticates with an API key, registers the current branch and then the
current commit, all from inside a CI run.
"""
