"""Infrastructure: HTTP client and image loading."""
