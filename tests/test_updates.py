# tests/test_updates.py
"""
Mean update: new centroids, total shift, and empty-cluster policies.
"""

import pytest
import torch

from lloyd.updates import MeanUpdater
from lloyd.exceptions import EmptyCluster


def test_centroid_is_mean_of_members():
    points = torch.tensor([[0.0, 0.0], [2.0, 2.0], [10.0, 10.0], [12.0, 14.0]])
    labels = torch.tensor([0, 0, 1, 1])
    centroids = torch.tensor([[0.0, 0.0], [10.0, 10.0]])

    new, shift = MeanUpdater().update(points, labels, centroids)

    assert torch.equal(new, torch.tensor([[1.0, 1.0], [11.0, 12.0]]))
    assert shift == pytest.approx(1.0 + 1.0 + 1.0 + 2.0)


def test_shift_sums_over_all_clusters_not_just_last():
    points = torch.tensor([[0.0, 0.0], [2.0, 2.0], [10.0, 10.0]])
    labels = torch.tensor([0, 0, 1])
    centroids = torch.tensor([[0.0, 0.0], [10.0, 10.0]])

    _, shift = MeanUpdater().update(points, labels, centroids)

    # last cluster did not move, first one did
    assert shift == pytest.approx(2.0)


def test_shift_zero_iff_no_centroid_moved():
    points = torch.tensor([[0.0], [2.0], [10.0]])
    labels = torch.tensor([0, 0, 1])

    _, shift = MeanUpdater().update(points, labels, torch.tensor([[1.0], [10.0]]))
    assert shift == 0.0

    _, shift = MeanUpdater().update(points, labels, torch.tensor([[1.0], [10.5]]))
    assert shift > 0.0


def test_previous_centroids_left_untouched():
    points = torch.tensor([[4.0], [6.0]])
    labels = torch.tensor([0, 0])
    centroids = torch.tensor([[0.0]])
    before = centroids.clone()

    new, _ = MeanUpdater().update(points, labels, centroids)

    assert torch.equal(centroids, before)
    assert new is not centroids
    assert new.shape == centroids.shape


def test_empty_cluster_retain():
    points = torch.tensor([[1.0], [3.0]])
    labels = torch.tensor([0, 0])
    centroids = torch.tensor([[0.0], [42.0]])

    new, shift = MeanUpdater(empty_cluster='retain').update(points, labels, centroids)

    assert new[1].item() == 42.0
    assert shift == pytest.approx(2.0)


def test_empty_cluster_reseed_uses_a_data_point():
    points = torch.tensor([[1.0], [3.0], [7.0]])
    labels = torch.tensor([0, 0, 0])
    centroids = torch.tensor([[0.0], [42.0]])
    gen = torch.Generator().manual_seed(3)

    new, _ = MeanUpdater(empty_cluster='reseed').update(points, labels, centroids, generator=gen)

    assert new.shape == (2, 1)
    assert new[1].item() in {1.0, 3.0, 7.0}


def test_empty_cluster_raise():
    points = torch.tensor([[1.0], [3.0]])
    labels = torch.tensor([1, 1])
    centroids = torch.tensor([[0.0], [2.0]])

    with pytest.raises(EmptyCluster) as exc_info:
        MeanUpdater(empty_cluster='raise').update(points, labels, centroids, iteration=4)

    assert exc_info.value.cluster_idx == 0
    assert exc_info.value.iteration == 4


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        MeanUpdater(empty_cluster='drop')
