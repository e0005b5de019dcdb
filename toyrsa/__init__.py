"""Teaching RSA toolkit: Miller-Rabin primes, key pairs and an interactive session."""

__version__ = "0.1.0"
__all__ = ["primes", "rsa", "cli"]