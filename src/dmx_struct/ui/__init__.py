"""User interfaces for dmx-struct."""
