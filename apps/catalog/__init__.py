# Catalog bounded context
