# This file marks the services package for API business logic modules.
