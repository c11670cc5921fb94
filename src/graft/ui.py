"""User-facing messages."""

from __future__ import annotations

DEFAULT_PROJECT_LABEL = " [ Default ]"

PROJECT_SELECTION_QUESTION = "Which project would you like to add the library to?"
LIBRARY_INSTALLATION_STARTS = "Starting library setup..."
LIBRARY_INSTALLATION_SKIPPED = "Skipping installation of {name}."
PACKAGE_MANAGER_INSTALLATION_IN_PROGRESS = "Installing {packages} with {manager}..."
PACKAGE_MANAGER_INSTALLATION_SUCCEED = "Installed {packages}."
PACKAGE_MANAGER_INSTALLATION_FAILED = "Installation of {packages} failed."
LIBRARY_ADDED = "Added {name} to {source_root}."
LIBRARY_FAILED = "Could not add {name}."
BUILD_STARTS = "Compiling with {compiler} ({config})..."
BUILD_SUCCEEDED = "Build finished."
BUILD_FAILED = "Build failed."
UNKNOWN_PROJECT = "Project '{name}' is not configured, using {source_root}."
PROJECT_CHOICE = "  {index}) {name}"
