# Services package init
"""
Unitip Backend — Services Layer
=================================

What:  Business logic between routes (HTTP) and the database.
How:   Stateless singletons; every call receives the request's AsyncSession
       and, where needed, the caller's AuthorizationContext.

Service Inventory:
    - AccountService: profile read and update
    - OfferService:   offer creation (role rule, table choice) and merged listing
    - JobService:     job applications
"""
