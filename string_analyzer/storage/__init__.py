# This package holds the process-local record store used by the strings API.
