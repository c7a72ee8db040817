"""Place Finder: search nearby places around the device location and hand off to navigation apps."""
