"""Domain services (auth, pedidos) and their persistence stores."""
