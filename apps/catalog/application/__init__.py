# Catalog application layer
