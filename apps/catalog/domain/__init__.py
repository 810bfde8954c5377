# Catalog domain layer
