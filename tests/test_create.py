"""Tests for CREATE / CREATE2 address derivation."""

import pytest

from icanaddr.create import create2_address, create_address
from icanaddr.networks import NetworkType
from icanaddr.types import Hash256, IcanAddress

SALT = 239048


class TestCreateAddress:
    """Tests for the nonce based scheme."""

    @pytest.mark.parametrize(
        "caller, expected",
        [
            (
                "cb72e8cF4629ACB360350399B6CFF367A97CF36E62B9",
                "cb41485a42277ed7f4fea81cc12efd12d57dcb549150",
            ),
            (
                "cb72e8cF4629ACB360350399B6CFF367A97CF36E62Ba",
                "cb68b6dd5cdf0c69c82081746ec9856dad75075e72e4",
            ),
            (
                "cb72e8cF4629ACB360350399B6CFF367A97CF36E62Bc",
                "cb6959e403eb217b58e3b892dd0d07b560ec36a7f7f4",
            ),
        ],
    )
    def test_known_vectors(self, caller, expected):
        """Test derivation against known addresses."""
        result = create_address(IcanAddress.from_hex(caller), 1)

        assert result == IcanAddress.from_hex(expected)
        assert str(result) == expected

    def test_deterministic(self, caller):
        """Test that identical inputs give identical addresses."""
        assert create_address(caller, 7) == create_address(caller, 7)

    def test_nonce_changes_address(self, caller):
        """Test that bumping the nonce gives a new address."""
        assert create_address(caller, 1) != create_address(caller, 2)

    def test_nonce_zero_and_max(self, caller):
        """Test the nonce range limits."""
        assert len(str(create_address(caller, 0))) == 44
        assert len(str(create_address(caller, 2**64 - 1))) == 44

    def test_nonce_out_of_range(self, caller):
        """Test that nonces outside uint64 are rejected."""
        with pytest.raises(ValueError):
            create_address(caller, -1)
        with pytest.raises(ValueError):
            create_address(caller, 2**64)

    def test_defaults_to_mainnet(self, caller):
        """Test that the result carries the mainnet prefix by default."""
        assert create_address(caller, 1).prefix == "cb"

    def test_other_network(self, caller):
        """Test that another network only changes prefix and checksum."""
        mainnet = str(create_address(caller, 1))
        testnet = str(create_address(caller, 1, NetworkType.TESTNET))

        assert testnet.startswith("ab")
        assert testnet[4:] == mainnet[4:]


class TestCreate2Address:
    """Tests for the salted scheme."""

    @pytest.mark.parametrize(
        "caller, code_byte, expected",
        [
            (
                "cb72e8cF4629ACB360350399B6CFF367A97CF36E62B9",
                0x0A,
                "cb1530dffdf96017ce586326f231beb4fbbdfb117447",
            ),
            (
                "cb72e8cF4629ACB360350399B6CFF367A97CF36E62Ba",
                0x0B,
                "cb43708ccdbe03ea3773582f4af6aab1982a8e9482d6",
            ),
            (
                "cb72e8cF4629ACB360350399B6CFF367A97CF36E62Bb",
                0x0C,
                "cb33779fc3d7bb2c9e6ded3c42e865b28c5d8a70c8b7",
            ),
        ],
    )
    def test_known_vectors(self, caller, code_byte, expected):
        """Test derivation against known addresses."""
        result = create2_address(
            IcanAddress.from_hex(caller),
            Hash256.repeat_byte(code_byte),
            SALT,
        )

        assert str(result) == expected

    def test_deterministic(self, caller):
        """Test that identical inputs give identical addresses."""
        code_hash = Hash256.repeat_byte(0x0A)

        assert create2_address(caller, code_hash, SALT) == create2_address(
            caller, code_hash, SALT
        )

    def test_salt_changes_address(self, caller):
        """Test that bumping the salt gives a new address."""
        code_hash = Hash256.repeat_byte(0x0A)

        assert create2_address(caller, code_hash, SALT) != create2_address(
            caller, code_hash, SALT + 1
        )

    def test_code_hash_changes_address(self, caller):
        """Test that a different code hash gives a new address."""
        first = create2_address(caller, Hash256.repeat_byte(0x0A), SALT)
        second = create2_address(caller, Hash256.repeat_byte(0x0B), SALT)

        assert first != second

    def test_salt_out_of_range(self, caller):
        """Test that salts outside uint256 are rejected."""
        code_hash = Hash256.repeat_byte(0x0A)

        with pytest.raises(ValueError):
            create2_address(caller, code_hash, -1)
        with pytest.raises(ValueError):
            create2_address(caller, code_hash, 2**256)

    def test_private_network(self, caller):
        """Test encoding the result for the private network."""
        result = create2_address(caller, Hash256.repeat_byte(0x0A), SALT, NetworkType.PRIVATE)

        assert str(result).startswith("ce")
        assert str(result)[4:] == "30dffdf96017ce586326f231beb4fbbdfb117447"

    def test_schemes_differ(self, caller):
        """Test that CREATE and CREATE2 do not collide for simple inputs."""
        assert create_address(caller, 1) != create2_address(
            caller, Hash256.repeat_byte(0x00), 1
        )
