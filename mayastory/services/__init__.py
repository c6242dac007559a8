"""Account store and the registration/login pipelines."""
