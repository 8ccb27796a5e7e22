# Test factories
