"""Request and response types exchanged with the hosting runtime."""
