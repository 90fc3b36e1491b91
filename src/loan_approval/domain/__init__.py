"""Domain layer - loan applications, stage outcomes and collaborator ports."""
