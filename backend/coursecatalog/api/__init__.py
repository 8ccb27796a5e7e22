# API layer
