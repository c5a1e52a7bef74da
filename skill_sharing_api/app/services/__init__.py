"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
persistence only through a store object, so API handlers never see how
data is kept.
"""
