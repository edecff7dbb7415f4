"""FullContact command-line adapter package.

Architectural role:
- Defines the terminal interaction boundary over `fullcontact.client`.
- Performs argument parsing and response printing only.
"""
