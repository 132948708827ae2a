"""Authentication and authorization for the bloglist API.

- Schema validation for registration and login
- Password hashing and verification (bcrypt)
- JWT token generation and validation
- Bearer-token guard for protected endpoints
- Named authorization policies for mutating operations

Auth endpoints (under the API prefix):
- POST /api/users - Register a user
- GET /api/users - List users
- POST /api/login - Authenticate and return a JWT token
"""

from . import policy, schemas, service, token

__all__ = ["policy", "schemas", "service", "token"]
