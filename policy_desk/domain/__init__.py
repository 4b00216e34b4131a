"""Pure policy rules: notification derivation and policy search.

Nothing here touches the database or the clock; callers pass in the
policies and the current time.
"""
