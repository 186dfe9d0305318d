# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Tests for seed derivation and the offset helpers."""

import hashlib

import pytest

from hashglyph.render.seed import SEED_LENGTH, Seed, derive_seed


class TestDeriveSeed:

    def test_md5_of_utf8_text(self):
        seed = derive_seed("Alex Morgan")
        assert seed.hexdigest() == "e5229d0bd07694061c7e60f77dae422e"

    def test_empty_string_is_valid(self):
        seed = derive_seed("")
        assert seed.hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"
        assert len(seed) == SEED_LENGTH

    def test_deterministic(self):
        assert derive_seed("Ada") == derive_seed("Ada")

    def test_salt_changes_seed(self):
        assert derive_seed("Ada", "2") != derive_seed("Ada")
        assert derive_seed("Ada", "2") == derive_seed("Ada2")

    def test_non_ascii_input(self):
        seed = derive_seed("Zoë Ångström")
        assert len(seed.digest) == 16

    def test_lone_surrogate(self):
        seed = derive_seed("\ud800abc")
        assert seed.digest == hashlib.md5(b"\xed\xa0\x80abc").digest()
        assert seed != derive_seed("abc")


class TestSeedOffsets:

    @pytest.fixture
    def seed(self):
        # 8f 9b fe 9d 13 45 23 7c b3 b2 b2 05 86 4d a0 75
        return derive_seed("User")

    def test_indexing(self, seed):
        assert seed[0] == 0x8F
        assert seed[15] == 0x75

    def test_offsets_wrap(self, seed):
        assert seed[16] == seed[0]
        assert seed[17] == seed[1]
        assert seed[39] == seed[7]

    def test_draw(self, seed):
        assert seed.draw(0, 2) == 1
        assert seed.draw(2, 100) == 254 % 100

    def test_draw_rejects_zero_modulus(self, seed):
        with pytest.raises(ValueError, match="Modulus"):
            seed.draw(0, 0)

    def test_unit_range(self, seed):
        assert seed.unit(2) == pytest.approx(254 / 255)
        assert all(0.0 <= seed.unit(i) <= 1.0 for i in range(16))

    def test_word_is_big_endian(self, seed):
        assert seed.word(0) == 0x8F9B
        assert seed.word(15) == (0x75 << 8) | 0x8F

    def test_pick(self, seed):
        options = ("a", "b", "c")
        assert seed.pick(options, 0) == options[143 % 3]

    def test_hexdigest_slice(self, seed):
        assert seed.hexdigest(0, 3) == "8f9bfe"


class TestSeedValidation:

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError, match="16 bytes"):
            Seed(b"short")

    def test_frozen(self):
        seed = derive_seed("x")
        with pytest.raises(AttributeError):
            seed.digest = bytes(16)
