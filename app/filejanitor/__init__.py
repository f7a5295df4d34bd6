"""filejanitor - Scan, quarantine and purge files by extension.

Finds files matching configured extensions across scan folders, moves
them into an extension-partitioned quarantine tree with a JSON
provenance log, and purges quarantined files once they have aged past a
retention threshold.
"""

__version__ = "0.3.0"
