# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""Tests for plotting functions."""

import pytest

# Skip all tests if matplotlib not available
matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import csgdist as cd  # noqa: E402


class TestPlotDistanceSlice:
    """Tests for plot_distance_slice function."""

    def test_returns_axes(self, bounds_xy):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        grid = cd.distance_grid_z(cd.Sphere(0, 0, 0, 2), 0, bounds_xy, resolution=(20, 20))
        ax = plot_distance_slice(grid)

        assert ax is not None
        plt.close('all')

    def test_accepts_existing_axes(self, bounds_xy):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        fig, ax = plt.subplots()
        grid = cd.distance_grid_z(cd.Sphere(0, 0, 0, 2), 0, bounds_xy, resolution=(20, 20))
        result_ax = plot_distance_slice(grid, ax=ax, show_colorbar=False)

        assert result_ax is ax
        plt.close('all')

    def test_sets_title(self, bounds_xy):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        grid = cd.distance_grid_z(cd.Sphere(0, 0, 0, 2), 0, bounds_xy, resolution=(10, 10))
        ax = plot_distance_slice(grid, title="Test Title")

        assert ax.get_title() == "Test Title"
        plt.close('all')

    def test_default_labels_follow_slice(self, bounds_xy):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        grid = cd.distance_grid_x(cd.CylinderX(0, 0, 2), 0, bounds_xy, resolution=(10, 10))
        ax = plot_distance_slice(grid)

        assert ax.get_xlabel() == "y"
        assert ax.get_ylabel() == "z"
        plt.close('all')

    def test_sets_labels(self, bounds_xy):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        grid = cd.distance_grid_y(cd.Sphere(0, 0, 0, 2), 0, bounds_xy, resolution=(10, 10))
        ax = plot_distance_slice(grid, xlabel="X [cm]", ylabel="Z [cm]")

        assert ax.get_xlabel() == "X [cm]"
        assert ax.get_ylabel() == "Z [cm]"
        plt.close('all')

    def test_extent_matches_bounds(self):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        grid = cd.distance_grid_z(cd.Sphere(0, 0, 0, 1), 0, (-2, 4, -1, 3), resolution=(6, 4))
        ax = plot_distance_slice(grid, show_colorbar=False)

        assert tuple(ax.images[0].get_extent()) == (-2.0, 4.0, -1.0, 3.0)
        plt.close('all')

    def test_contour_levels(self, bounds_xy):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        grid = cd.distance_grid_z(cd.CylinderZ(0, 0, 3), 0, bounds_xy, resolution=(40, 40))
        ax = plot_distance_slice(grid, levels=[0.5, 1.0])

        assert ax is not None
        plt.close('all')

    def test_all_undefined(self, bounds_xy):
        import matplotlib.pyplot as plt
        from csgdist import plot_distance_slice

        grid = cd.distance_grid_z(cd.XPlane(0), 0, bounds_xy, resolution=(10, 10))
        ax = plot_distance_slice(grid, levels=[0.5], show_colorbar=False)

        assert ax is not None
        plt.close('all')


class TestPlotSurface:
    """Tests for plot_surface function."""

    def test_returns_axes(self):
        import matplotlib.pyplot as plt
        from csgdist import plot_surface

        ax = plot_surface(cd.Sphere(0, 0, 0, 3), resolution=(20, 20))

        assert "Sphere" in ax.get_title()
        plt.close('all')

    @pytest.mark.parametrize("axis", ['x', 'y', 'z'])
    def test_axes(self, axis):
        import matplotlib.pyplot as plt
        from csgdist import plot_surface

        ax = plot_surface(cd.TorusX(0, 0, 0, 3, 1, 1), axis=axis, resolution=(10, 10),
                          show_colorbar=False)
        assert ax is not None
        plt.close('all')

    def test_custom_title(self):
        import matplotlib.pyplot as plt
        from csgdist import plot_surface

        ax = plot_surface(cd.Sphere(0, 0, 0, 3), resolution=(10, 10), title="Ball")

        assert ax.get_title() == "Ball"
        plt.close('all')

    def test_bad_axis(self):
        from csgdist import plot_surface

        with pytest.raises(ValueError, match="axis"):
            plot_surface(cd.Sphere(0, 0, 0, 1), axis='w')
