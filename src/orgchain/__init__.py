"""OrgChain: declarative AWS Organizations resource trees with rate-limit-safe ordering."""
