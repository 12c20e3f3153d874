from functools import partial
from itertools import permutations
from math import comb, log
import numpy as np
import pytest
from m3fren.computation.entropy import (band_entropy, chebyshev_distances,
                                        mfren, normalized_shannon,
                                        permutation_counts,
                                        permutation_distribution,
                                        permutation_index, permutation_labels,
                                        symbolize)
from m3fren.core.embedding import embed, flatten_channels, multivariate_embed
from m3fren.utils.data_models import EntropyConfig
from m3fren.utils.exceptions import (InsufficientSamplesError,
                                     InvalidParameterError, ShapeMismatchError)


def test_labels():
    labels = permutation_labels()
    assert len(labels) == 24 == len(set(labels))
    assert labels[0] == 'ABTD'
    assert labels[-1] == 'DTBA'


def test_permutation_index_is_a_bijection():
    order = np.array(list(permutations(range(4)))).T
    np.testing.assert_array_equal(permutation_index(order), np.arange(24))


def test_symbolize_ties_follow_band_order():
    d_max = np.array([[1.0, 2.0, 0.5],
                      [1.0, 1.0, 0.5],
                      [0.0, 1.0, 0.5],
                      [1.0, 3.0, 0.5]])
    order = symbolize(d_max)
    # column 0: theta smallest, then alpha, beta, delta tied -> A, B, D
    np.testing.assert_array_equal(order[:, 0], [2, 0, 1, 3])
    # column 1: beta, theta tied at 1 -> B before T
    np.testing.assert_array_equal(order[:, 1], [1, 2, 0, 3])
    # column 2: all tied
    np.testing.assert_array_equal(order[:, 2], [0, 1, 2, 3])


def test_identical_ramps_give_zero(ramp_bands):
    assert mfren(*ramp_bands, m=2, tau=1) == 0.0


def test_constant_bands_are_legal():
    const = np.full(50, 3.0)
    assert band_entropy(const, const, const, const) == 0.0


def test_counts_sum_to_number_of_pairs(random_bands):
    vectors = [embed(2, 1, band) for band in random_bands]
    n_vec = vectors[0].shape[0]
    d_max = np.vstack([chebyshev_distances(v) for v in vectors])
    counts = permutation_counts(symbolize(d_max))
    assert counts.shape == (24,)
    assert counts.sum() == comb(n_vec, 2)


def test_distribution_sums_to_one(random_bands):
    dist = permutation_distribution(*random_bands)
    assert list(dist.index) == permutation_labels()
    assert dist.sum() == pytest.approx(1.0)


def test_entropy_matches_distribution(random_bands):
    dist = permutation_distribution(*random_bands, m=3)
    probs = dist[dist > 0].values
    expected = -np.sum(probs * np.log(probs)) / log(24)
    assert mfren(*random_bands, m=3) == pytest.approx(expected)


def test_random_bands_high_entropy(random_bands):
    value = mfren(*random_bands)
    assert 0.8 < value <= 1.0


def test_normalized_shannon_extremes():
    assert normalized_shannon(np.full(24, 5)) == pytest.approx(1.0)
    one_hot = np.zeros(24)
    one_hot[7] = 12
    assert normalized_shannon(one_hot) == 0.0
    assert 0.0 < normalized_shannon([3, 1] + [0] * 22) < 1.0


def test_deterministic(random_bands):
    assert mfren(*random_bands) == mfren(*random_bands)


def test_duplicated_bands_do_not_raise_entropy(random_bands):
    alpha, beta, theta, delta = random_bands
    tied = mfren(alpha, alpha.copy(), theta, delta)
    assert tied <= mfren(alpha, beta, theta, delta)
    # alpha always precedes its copy in every column
    dist = permutation_distribution(alpha, alpha.copy(), theta, delta)
    after = [label for label in dist.index if label.index('B') < label.index('A')]
    assert dist[after].sum() == 0.0


def test_config_and_options_agree(random_bands):
    cfg = EntropyConfig(m=3, tau=2)
    assert mfren(*random_bands, config=cfg) == mfren(*random_bands, m=3, t=2)


def test_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        mfren(np.zeros(20), np.zeros(20), np.zeros(19), np.zeros(20))


def test_insufficient_samples():
    short = np.arange(3.0)
    # 3 - 2 = 1 vector only
    with pytest.raises(InsufficientSamplesError) as info:
        mfren(short, short, short, short)
    assert info.value.n_vectors == 1
    assert info.value.scale is None


def test_invalid_parameter_rejected_before_computation():
    with pytest.raises(InvalidParameterError):
        mfren(np.zeros(20), np.zeros(20), np.zeros(20), np.zeros(20), m=0)


def test_mfren_accepts_row_vectors(random_bands):
    rows = [band[None, :] for band in random_bands]
    assert mfren(*rows) == mfren(*random_bands)
    assert permutation_distribution(*rows).equals(
            permutation_distribution(*random_bands))


def test_mfren_rejects_multichannel(random_mv_bands):
    with pytest.raises(ShapeMismatchError):
        mfren(*random_mv_bands)


def test_multivariate_channel_count_checked():
    rng = np.random.default_rng(11)
    bands = [flatten_channels(rng.standard_normal((2, 40))) for _ in range(4)]
    with pytest.raises(ShapeMismatchError):
        band_entropy(*bands, m=[2] * 4, tau=[1] * 4,
                     embedder=multivariate_embed)
    with pytest.raises(ShapeMismatchError):
        band_entropy(*bands, m=[2] * 4, tau=[1] * 4,
                     embedder=partial(multivariate_embed, n_channels=2))
    value = band_entropy(*bands, m=[2] * 2, tau=[1] * 2,
                         embedder=partial(multivariate_embed, n_channels=2))
    assert 0.0 <= value <= 1.0


def test_normalized_shannon_empty_tally():
    with pytest.raises(InsufficientSamplesError):
        normalized_shannon(np.zeros(24))
