"""Assistance Register package.

Scans credential codes, resolves them against the remote directory and keeps
an append-only CSV ledger of attendance. Organized by feature modules
(ledger, resolver, scanning, manual) with a thin Flask controller layer.
"""
