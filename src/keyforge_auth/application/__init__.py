"""Application layer: the credential provider and the ports it depends on."""
