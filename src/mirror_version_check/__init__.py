"""Resolve release versions against a mirror's directory listing."""
