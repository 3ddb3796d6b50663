"""
Data Transfer Objects (DTOs) Layer

DTOs decouple the API layer from the database models, so the tutorials
table can change without changing the JSON contract.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
"""
