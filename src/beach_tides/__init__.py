"""Beach tide prediction, extrema detection and safety guidance."""
