"""Zoo backend: animals, habitats and the rules for moving between them."""
