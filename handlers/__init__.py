"""
handlers/ - Presentation Layer
================================
Terminal shell. Each handler collects input through the Console,
delegates to the appropriate Service, and prints the result.
No business logic lives here.
"""
