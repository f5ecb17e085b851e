"""Tests for the viewport and value <-> pixel transformation."""

import numpy as np
import pytest

from tickplanner.utils.coordinate_transform import Transformer, ViewPort


class TestViewPort:
    """Tests for the content rect and zoom state."""

    @pytest.fixture
    def viewport(self):
        """A chart with margins on every side."""
        return ViewPort(
            chart_width=480,
            chart_height=320,
            offset_left=60,
            offset_top=20,
            offset_right=60,
            offset_bottom=40,
        )

    def test_content_rect(self, viewport):
        assert viewport.content_left == 60
        assert viewport.content_right == 420
        assert viewport.content_top == 20
        assert viewport.content_bottom == 280
        assert viewport.content_width == 360
        assert viewport.content_height == 260

    def test_set_chart_dimens(self, viewport):
        viewport.set_chart_dimens(600, 400)
        assert viewport.content_width == 480
        assert viewport.content_height == 340

    def test_initially_fully_zoomed_out(self, viewport):
        assert viewport.is_fully_zoomed_out
        assert viewport.is_fully_zoomed_out_x
        assert viewport.is_fully_zoomed_out_y

    def test_zoom_single_axis(self, viewport):
        viewport.zoom(2.0, 1.0)
        assert not viewport.is_fully_zoomed_out_x
        assert viewport.is_fully_zoomed_out_y
        assert not viewport.is_fully_zoomed_out

    def test_min_scale_above_one_counts_as_zoomed(self, viewport):
        viewport.min_scale_y = 2.0
        assert not viewport.is_fully_zoomed_out_y

    def test_zoom_out_is_clamped(self, viewport):
        viewport.zoom(0.5, 0.5)
        assert viewport.scale_x == 1.0
        assert viewport.scale_y == 1.0

    def test_zoom_in_is_clamped(self, viewport):
        viewport.zoom(1e6, 1e6)
        assert viewport.scale_x == viewport.max_scale_x
        assert viewport.scale_y == viewport.max_scale_y

    def test_translate_is_clamped(self, viewport):
        viewport.zoom(2.0, 2.0)
        viewport.translate(-10000, 10000)
        assert viewport.trans_x == pytest.approx(-360.0)
        assert viewport.trans_y == pytest.approx(260.0)
        viewport.translate(10000, -10000)
        assert viewport.trans_x == 0.0
        assert viewport.trans_y == 0.0

    def test_reset_zoom(self, viewport):
        viewport.zoom(3.0, 3.0)
        viewport.translate(-50, 50)
        viewport.reset_zoom()
        assert viewport.is_fully_zoomed_out
        assert viewport.trans_x == 0.0
        assert viewport.trans_y == 0.0

    def test_touch_matrix(self, viewport):
        viewport.zoom(2.0, 3.0)
        matrix = viewport.touch_matrix
        assert matrix.shape == (3, 3)
        assert matrix[0, 0] == 2.0
        assert matrix[1, 1] == 3.0


class TestTransformer:
    """Tests for value <-> pixel conversion."""

    @pytest.fixture
    def viewport(self):
        return ViewPort(480, 320, 60, 20, 60, 40)

    @pytest.fixture
    def transform(self, viewport):
        """x: 0..3600, y: 100..2000 on the content rect."""
        transformer = Transformer(viewport)
        transformer.prepare_matrix_value_px(0.0, 3600.0, 1900.0, 100.0)
        transformer.prepare_matrix_offset(inverted=False)
        return transformer

    @pytest.fixture
    def transform_inverted(self, viewport):
        transformer = Transformer(viewport)
        transformer.prepare_matrix_value_px(0.0, 3600.0, 1900.0, 100.0)
        transformer.prepare_matrix_offset(inverted=True)
        return transformer

    def test_value_to_pixel_origin(self, transform):
        """Smallest values sit at the bottom-left of the content rect."""
        x, y = transform.point_value_to_pixel(0.0, 100.0)
        assert x == pytest.approx(60.0)
        assert y == pytest.approx(280.0)

    def test_value_to_pixel_max(self, transform):
        x, y = transform.point_value_to_pixel(3600.0, 2000.0)
        assert x == pytest.approx(420.0)
        assert y == pytest.approx(20.0)

    def test_value_to_pixel_center(self, transform):
        x, y = transform.point_value_to_pixel(1800.0, 1050.0)
        assert x == pytest.approx(240.0)
        assert y == pytest.approx(150.0)

    def test_inverted_puts_min_on_top(self, transform_inverted):
        assert transform_inverted.point_value_to_pixel(0.0, 100.0) == pytest.approx((60.0, 20.0))
        assert transform_inverted.point_value_to_pixel(3600.0, 2000.0) == pytest.approx((420.0, 280.0))

    def test_value_for_touch_point(self, transform):
        assert transform.value_for_touch_point(60.0, 20.0) == pytest.approx((0.0, 2000.0))
        assert transform.value_for_touch_point(420.0, 280.0) == pytest.approx((3600.0, 100.0))

    def test_round_trip(self, transform):
        x, y = transform.point_value_to_pixel(1234.5, 777.0)
        assert transform.value_for_touch_point(x, y) == pytest.approx((1234.5, 777.0))

    def test_points_to_pixel_vectorized(self, transform):
        points = np.array([[0.0, 100.0], [1800.0, 1050.0], [3600.0, 2000.0]])
        pixels = transform.points_to_pixel(points)
        assert pixels.shape == (3, 2)
        np.testing.assert_allclose(pixels, [[60.0, 280.0], [240.0, 150.0], [420.0, 20.0]])

    def test_zero_deltas_do_not_divide_by_zero(self, viewport):
        transformer = Transformer(viewport)
        transformer.prepare_matrix_value_px(5.0, 0.0, 0.0, 5.0)
        transformer.prepare_matrix_offset(False)
        assert transformer.point_value_to_pixel(5.0, 5.0) == pytest.approx((60.0, 280.0))

    def test_zoom_keeps_center_fixed(self):
        viewport = ViewPort(400, 300, 0, 0, 0, 0)
        transformer = Transformer(viewport)
        transformer.prepare_matrix_value_px(0.0, 100.0, 100.0, 0.0)
        transformer.prepare_matrix_offset(False)
        assert transformer.point_value_to_pixel(50.0, 50.0) == pytest.approx((200.0, 150.0))

        # zoom center in content space: y grows upwards from content_bottom
        viewport.zoom(2.0, 2.0, 200.0, -150.0)

        assert transformer.point_value_to_pixel(50.0, 50.0) == pytest.approx((200.0, 150.0))
        assert transformer.value_for_touch_point(0.0, 0.0) == pytest.approx((25.0, 75.0))
