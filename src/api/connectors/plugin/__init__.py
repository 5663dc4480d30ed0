"""Connector do plugin — borda entre o kernel e o runner."""
