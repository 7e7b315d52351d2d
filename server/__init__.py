"""HTTP service exposing UBX-NAV-PVT parsing, history and export."""
