# This file marks the schemas package for API response and request models.
