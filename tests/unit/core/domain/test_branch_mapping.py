import pytest

from mr_mirror.core.domain.mirroring import BranchMapping


def test_from_pairs_builds_lookup():
    mapping = BranchMapping.from_pairs(["MASTER=Branch_v2.1.1", "Branch_v2.0=MASTER"])

    assert mapping.downstream_for("MASTER") == "Branch_v2.1.1"
    assert mapping.downstream_for("Branch_v2.0") == "MASTER"
    assert len(mapping) == 2


def test_unmapped_branch_returns_none():
    mapping = BranchMapping.from_pairs(["MASTER=Branch_v2.1.1"])

    assert mapping.downstream_for("develop") is None


@pytest.mark.parametrize("pair", ["MASTER", "a=b=c", "=downstream", "MASTER=", "  "])
def test_malformed_pairs_are_skipped(pair):
    mapping = BranchMapping.from_pairs([pair])

    assert len(mapping) == 0


def test_last_pair_wins_for_repeated_branch():
    mapping = BranchMapping.from_pairs(["MASTER=one", "MASTER=two"])

    assert mapping.downstream_for("MASTER") == "two"


def test_mapping_is_read_only():
    mapping = BranchMapping.from_pairs(["MASTER=Branch_v2.1.1"])

    with pytest.raises(TypeError):
        mapping._pairs["MASTER"] = "other"
    assert mapping.as_dict() == {"MASTER": "Branch_v2.1.1"}
