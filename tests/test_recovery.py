import pytest

from routing.recovery import decompose, normalization_recovery, recover_paths

H1, H2, H3 = 4, 5, 6
S1, S2, S3, S4 = 0, 1, 2, 3

PATH_DIRECT = ((H1, S1), (S1, S3), (S3, H2))
PATH_VIA_S2 = ((H1, S1), (S1, S2), (S2, S3), (S3, H2))
PATH_VIA_S4 = ((H1, S1), (S1, S4), (S4, S3), (S3, H2))


def test_recover_two_disjoint_paths(ring):
    flow_groups = {(H1, H2): [(H1, S1, 2.0), (S1, S3, 1.0), (S3, H2, 2.0),
                              (S1, S2, 1.0), (S2, S3, 1.0)]}

    scheme = recover_paths(ring, flow_groups)

    assert scheme == {(H1, H2): {PATH_DIRECT: 0.5, PATH_VIA_S2: 0.5}}


def test_fractional_flows_are_weighted(ring):
    flows = [(H1, S1, 1.0), (S1, S3, 0.5), (S1, S4, 0.5), (S4, S3, 0.5),
             (S3, H2, 1.0)]

    paths = decompose(H1, H2, flows)

    assert paths == {PATH_DIRECT: 0.5, PATH_VIA_S4: 0.5}


def test_noise_below_epsilon_is_ignored(ring):
    flows = [(H1, S1, 1.0), (S1, S3, 1.0), (S3, H2, 1.0), (S1, S2, 1e-9),
             (S2, S3, 1e-9)]

    assert decompose(H1, H2, flows) == {PATH_DIRECT: 1.0}


def test_empty_group_has_no_entry(ring):
    assert recover_paths(ring, {(H1, H3): []}) == {}


def test_flow_not_reaching_the_destination(ring):
    flow_groups = {(H1, H2): [(H1, S1, 1.0), (S1, S2, 1.0)]}

    assert recover_paths(ring, flow_groups) == {}


def test_normalization_recovery():
    scheme = {
        (H1, H2): {PATH_DIRECT: 0.5, PATH_VIA_S2: 0.25, PATH_VIA_S4: 0.25},
        (H2, H1): {((H2, S3), (S3, S1), (S1, H1)): 1.0},
    }

    # failing s1-s3 takes out the direct path and the only h2 -> h1 path
    recovered = normalization_recovery(scheme, [(S1, S3)])

    assert list(recovered) == [(H1, H2)]
    assert recovered[(H1, H2)] == {PATH_VIA_S2: pytest.approx(0.5),
                                   PATH_VIA_S4: pytest.approx(0.5)}


def test_normalization_recovery_without_failures():
    scheme = {(H1, H2): {PATH_DIRECT: 1.0}}

    assert normalization_recovery(scheme, []) == scheme
