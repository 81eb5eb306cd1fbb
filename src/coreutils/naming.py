"""
Random resource names and passwords for sample runs.

Names get a random numeric suffix so concurrent runs of the sample in the same
subscription do not collide. A NameGenerator also guarantees that no name is
handed out twice within one run.
"""

import re
import secrets
import string

SUFFIX_DIGITS = 6
MAX_GENERATION_ATTEMPTS = 100

# Azure naming rules, per resource type
RESOURCE_GROUP_NAME_MAX_LENGTH = 90
SERVER_NAME_MAX_LENGTH = 63
DATABASE_NAME_MAX_LENGTH = 128
POOL_NAME_MAX_LENGTH = 128
FIREWALL_RULE_NAME_MAX_LENGTH = 128

SERVER_NAME_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")
RESOURCE_GROUP_NAME_PATTERN = re.compile(r"^[\w().-]{0,89}[\w()-]$")
# Databases, pools and firewall rules share the SQL child resource rules
CHILD_NAME_PATTERN = re.compile(r"^[^<>*%&:\\/?]{0,127}[^<>*%&:\\/?. ]$")

PASSWORD_LENGTH = 20
PASSWORD_SYMBOLS = "!@#$%^*-_+="


def create_random_name(prefix: str, max_length: int = RESOURCE_GROUP_NAME_MAX_LENGTH) -> str:
    """Append a random numeric suffix to prefix, trimming prefix to fit max_length"""
    suffix = "".join(secrets.choice(string.digits) for _ in range(SUFFIX_DIGITS))
    return prefix[: max_length - SUFFIX_DIGITS] + suffix


def create_password(length: int = PASSWORD_LENGTH) -> str:
    """
    Generate a password that satisfies the SQL server complexity policy

    The policy needs 8-128 characters from at least three of: uppercase,
    lowercase, digits, symbols. We always include all four.
    """
    if length < 8 or length > 128:
        raise ValueError(f"Password length must be between 8 and 128, got {length}")

    pools = [string.ascii_uppercase, string.ascii_lowercase, string.digits, PASSWORD_SYMBOLS]
    chars = [secrets.choice(pool) for pool in pools]
    alphabet = "".join(pools)
    chars += [secrets.choice(alphabet) for _ in range(length - len(chars))]
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


class NameGenerator:
    """Hands out randomized names that are unique for the lifetime of the generator"""

    def __init__(self):
        self.issued: set[str] = set()

    def _unique(self, prefix: str, max_length: int, pattern: re.Pattern) -> str:
        for _ in range(MAX_GENERATION_ATTEMPTS):
            name = create_random_name(prefix, max_length)
            if name in self.issued:
                continue
            if not pattern.match(name):
                raise ValueError(f"Prefix {prefix!r} produces invalid name {name!r}")
            self.issued.add(name)
            return name
        raise RuntimeError(
            f"Could not generate a unique name for prefix {prefix!r} "
            f"after {MAX_GENERATION_ATTEMPTS} attempts"
        )

    def resource_group(self, prefix: str) -> str:
        return self._unique(prefix, RESOURCE_GROUP_NAME_MAX_LENGTH, RESOURCE_GROUP_NAME_PATTERN)

    def server(self, prefix: str) -> str:
        # Server names become DNS labels: lowercase only
        return self._unique(prefix.lower(), SERVER_NAME_MAX_LENGTH, SERVER_NAME_PATTERN)

    def database(self, prefix: str) -> str:
        return self._unique(prefix, DATABASE_NAME_MAX_LENGTH, CHILD_NAME_PATTERN)

    def elastic_pool(self, prefix: str) -> str:
        return self._unique(prefix, POOL_NAME_MAX_LENGTH, CHILD_NAME_PATTERN)

    def firewall_rule(self, prefix: str) -> str:
        return self._unique(prefix, FIREWALL_RULE_NAME_MAX_LENGTH, CHILD_NAME_PATTERN)
