"""Service helpers for the fan-club app.

Modules:
    - :mod:`.stats` – season aggregation for the Stats and Home pages.
    - :mod:`.whitelist` – admin / allow-list checks for sign-in.
    - :mod:`.google_oauth` – Google OAuth 2.0 authorization-code flow.
    - :mod:`.push` – OneSignal push delivery.
    - :mod:`.storage` – public image uploads.
    - :mod:`.notifications` – announcements and per-visitor read state.
    - :mod:`.votes` – attendance poll.
"""
