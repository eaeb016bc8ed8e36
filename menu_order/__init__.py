"""Terminal menu browsing and ordering screen."""
