"""dotgirl - dotfile storage and symlink management."""
