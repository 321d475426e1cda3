"""apkctl - List installed Android apps and export their APK files."""

__version__ = "0.1.0"
