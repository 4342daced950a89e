"""
UTILITIES PACKAGE
=================

Helpers used by the services (no HTTP, no business logic):

  time_info - utc_now(), days_from_now(): timezone-aware timestamps for the store.
  passwords - hash_password(), check_password(): bcrypt with a per-hash salt.
"""
