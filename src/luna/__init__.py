"""Luna: async Helius client for Solana with transaction confirmation polling."""

__version__ = "0.1.0"
