"""Discord Integration Package.

This package contains the Discord integration modules. Contains:

- client: Async REST client for bot operations (DM channels, messages, identity).
- oauth: OAuth2 code exchange and user lookup for the web application login.
- bot: Long-lived bot handle owning the process-wide client.
- errors: Exception raised when the Discord API rejects a request.
"""
