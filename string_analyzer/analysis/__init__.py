# This package holds the pure string analysis core.
# Nothing here touches HTTP, storage, or configuration, so it is trivially unit-testable.
