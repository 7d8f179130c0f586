"""PosterForge command line application."""
