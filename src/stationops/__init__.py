"""StationOps - back-office API for a radio station.

Staff onboarding by invitation, client and staff records with
human-readable IDs, and the weekly broadcast schedule.
"""

__version__ = "0.1.0"
