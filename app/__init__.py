"""Channel directory application package.

Holds the notification channel records of OSRS goal tracker users.
"""
