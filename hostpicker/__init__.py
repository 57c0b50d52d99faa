"""Random host picker: one host per round, never repeated within a round."""
