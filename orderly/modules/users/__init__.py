"""
User Management Module

User CRUD with clear separation of concerns:
- domain: Domain models
- schemas: Request/response models
- repositories: Data access
- services: Business logic
- api: REST API endpoints
"""
