import pytest

from pixelstrip.chipfeatures import (
    Lpd6803Feature,
    Lpd8806Feature,
    P9813Feature,
    decode_555,
    encode_555,
)
from pixelstrip.features import Rgb


def test_encode_555_start_bit_for_black():
    assert encode_555(0, 0, 0) == 0x8000


def test_encode_555_all_bits_for_white():
    assert encode_555(255, 255, 255) == 0xFFFF


@pytest.mark.parametrize("channels", [(0, 0, 0), (8, 16, 248), (248, 128, 40), (96, 0, 200)])
def test_decode_555_round_trip(channels):
    assert decode_555(encode_555(*channels)) == channels


@pytest.mark.parametrize("channels", [(7, 255, 1), (13, 130, 77)])
def test_decode_555_drops_low_bits(channels):
    decoded = decode_555(encode_555(*channels))
    for original, value in zip(channels, decoded):
        assert value <= original
        assert original - value < 8
        assert value % 8 == 0


@pytest.mark.parametrize("order", ["rgb", "brg", "grb", "gbr"])
def test_lpd6803_round_trip(order):
    feature = Lpd6803Feature(order)
    pixels = bytearray(feature.pixel_size * 3)
    color = Rgb(8, 136, 248)
    feature.apply_pixel_color(pixels, 1, color)
    assert feature.retrieve_pixel_color(pixels, 1) == color
    assert pixels[0:2] == bytes(2)
    assert pixels[4:6] == bytes(2)


def test_lpd6803_bytes_are_big_endian_word_in_order():
    feature = Lpd6803Feature("brg")
    pixels = bytearray(2)
    color = Rgb(r=16, g=64, b=200)
    feature.apply_pixel_color(pixels, 0, color)
    assert bytes(pixels) == encode_555(color.b, color.r, color.g).to_bytes(2, "big")
    assert pixels[0] & 0x80


def test_lpd6803_clear_fills_every_pixel():
    feature = Lpd6803Feature()
    pixel = bytearray(feature.pixel_size)
    feature.apply_pixel_color(pixel, 0, Rgb(40, 80, 120))
    pixels = bytearray(feature.pixel_size * 4)
    feature.replicate_pixel(pixels, 0, bytes(pixel), 4)
    assert all(feature.retrieve_pixel_color(pixels, i) == Rgb(40, 80, 120) for i in range(4))


@pytest.mark.parametrize("order", ["grb", "brg"])
def test_lpd8806_round_trip_even_values(order):
    feature = Lpd8806Feature(order)
    pixels = bytearray(feature.pixel_size * 2)
    color = Rgb(254, 100, 2)
    feature.apply_pixel_color(pixels, 1, color)
    assert feature.retrieve_pixel_color(pixels, 1) == color


def test_lpd8806_high_bit_set_on_every_byte():
    feature = Lpd8806Feature()
    pixels = bytearray(3)
    feature.apply_pixel_color(pixels, 0, Rgb(0, 0, 0))
    assert bytes(pixels) == bytes([0x80, 0x80, 0x80])


def test_lpd8806_byte_order_follows_channel_order():
    feature = Lpd8806Feature("brg")
    pixels = bytearray(3)
    color = Rgb(r=20, g=60, b=200)
    feature.apply_pixel_color(pixels, 0, color)
    assert [(b << 1) & 0xFF for b in pixels] == [color.b, color.r, color.g]


def test_lpd8806_odd_value_loses_low_bit():
    feature = Lpd8806Feature()
    pixels = bytearray(3)
    feature.apply_pixel_color(pixels, 0, Rgb(255, 255, 255))
    decoded = feature.retrieve_pixel_color(pixels, 0)
    assert decoded.r == decoded.g == decoded.b
    assert 255 - decoded.r == 1


def test_p9813_round_trip_and_layout():
    feature = P9813Feature()
    pixels = bytearray(feature.pixel_size * 2)
    color = Rgb(r=10, g=20, b=30)
    feature.apply_pixel_color(pixels, 1, color)
    assert pixels[5:8] == bytes([30, 20, 10])
    assert feature.retrieve_pixel_color(pixels, 1) == color


def test_p9813_flag_byte_for_black_and_white():
    feature = P9813Feature()
    pixels = bytearray(8)
    feature.apply_pixel_color(pixels, 0, Rgb(0, 0, 0))
    feature.apply_pixel_color(pixels, 1, Rgb(255, 255, 255))
    assert pixels[0] == 0xFF
    assert pixels[4] == 0xC0


def test_p9813_copy_pixels_moves_data():
    feature = P9813Feature()
    pixels = bytearray(feature.pixel_size * 3)
    feature.apply_pixel_color(pixels, 0, Rgb(1, 2, 3))
    feature.apply_pixel_color(pixels, 1, Rgb(4, 5, 6))
    feature.copy_pixels(pixels, 1, pixels, 0, 2)
    assert feature.retrieve_pixel_color(pixels, 1) == Rgb(1, 2, 3)
    assert feature.retrieve_pixel_color(pixels, 2) == Rgb(4, 5, 6)


@pytest.mark.parametrize("cls", [Lpd6803Feature, Lpd8806Feature])
def test_invalid_order_rejected(cls):
    with pytest.raises(ValueError):
        cls("rrg")