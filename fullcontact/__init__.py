"""FullContact contact-management client package.

Architectural role:
    Thin binding over the FullContact contact-list REST API. Each public
    operation maps to one HTTP endpoint and returns the decoded JSON response.

Package split:
    - `client`: configuration, HTTP transport and the contact operations facade.
    - `api`: command-line adapter over the facade.
"""

__version__ = "0.1.0"
