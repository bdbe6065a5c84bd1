"""fedid - identity and credential core for a federated social network.

Registers local users under ActivityPub-style ids, stores their Argon2id
password hashes and issues signed bearer tokens on login.
"""

__version__ = "0.1.0"
