"""Bundled data files for apkctl."""
