"""Infrastructure layer — file input for the simulation."""
