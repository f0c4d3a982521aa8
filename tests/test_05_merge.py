"""
End-to-end merging through ImageMerger and the codec
"""
import numpy as np
import pytest
from PIL import Image

from conftest import make_image
from pixelweave import ImageMerger, PipelineStage, merge_images
from pixelweave.codec import decode_image, encode_image
from pixelweave.errors import DifferentImageFormats, ImageDataError, PixelContractError, UnsupportedOutputFormat
from pixelweave.output_image import OutputImage


def pixels_of(image):
    return np.asarray(image.convert('RGBA')).reshape(-1, 4)


def test_two_by_two_alternation(tmp_path):
    a = make_image(2, 2, seed=1)
    b = make_image(2, 2, seed=2)
    a.save(tmp_path / 'a.png')
    b.save(tmp_path / 'b.png')

    output = merge_images(tmp_path / 'a.png', tmp_path / 'b.png', tmp_path / 'out.png')

    p, q = pixels_of(a), pixels_of(b)
    expected = np.stack([p[0], q[1], p[2], q[3]])
    assert output.data == expected.tobytes()

    with Image.open(tmp_path / 'out.png') as written:
        assert written.format == 'PNG'
        assert written.size == (2, 2)
        assert np.array_equal(pixels_of(written), expected)


def test_larger_image_scaled_to_smaller(tmp_path):
    a = make_image(4, 4, seed=1)
    b = make_image(2, 2, seed=2)
    a.save(tmp_path / 'a.png')
    b.save(tmp_path / 'b.png')

    merger = ImageMerger()
    output = merger.merge_files(tmp_path / 'a.png', tmp_path / 'b.png', tmp_path / 'out.png')

    assert (output.width, output.height) == (2, 2)
    resized_a = pixels_of(a.resize((2, 2), Image.Resampling.BILINEAR))
    q = pixels_of(b)
    expected = np.stack([resized_a[0], q[1], resized_a[2], q[3]])
    assert output.data == expected.tobytes()
    assert merger.stage is PipelineStage.ENCODED


def test_different_formats_abort(tmp_path):
    make_image(2, 2, seed=1).convert('RGB').save(tmp_path / 'a.jpg', format='JPEG')
    make_image(2, 2, seed=2).save(tmp_path / 'b.png', format='PNG')

    merger = ImageMerger()
    with pytest.raises(DifferentImageFormats) as excinfo:
        merger.merge_files(tmp_path / 'a.jpg', tmp_path / 'b.png', tmp_path / 'out.png')

    assert (excinfo.value.format_a, excinfo.value.format_b) == ('JPEG', 'PNG')
    assert merger.stage is PipelineStage.DECODED
    assert not (tmp_path / 'out.png').exists()


def test_format_detected_from_content_not_extension(tmp_path):
    make_image(2, 2, seed=1).save(tmp_path / 'a.img', format='PNG')
    make_image(2, 2, seed=2).save(tmp_path / 'b.img', format='PNG')
    merge_images(tmp_path / 'a.img', tmp_path / 'b.img', tmp_path / 'out.img')

    with Image.open(tmp_path / 'out.img') as written:
        assert written.format == 'PNG'


def test_jpeg_output_flattened_to_rgb(tmp_path):
    make_image(8, 8, seed=1).convert('RGB').save(tmp_path / 'a.jpg')
    make_image(4, 4, seed=2).convert('RGB').save(tmp_path / 'b.jpg')
    output = merge_images(tmp_path / 'a.jpg', tmp_path / 'b.jpg', tmp_path / 'out.jpg')

    assert output.is_complete
    with Image.open(tmp_path / 'out.jpg') as written:
        assert written.format == 'JPEG'
        assert written.mode == 'RGB'
        assert written.size == (4, 4)


@pytest.mark.parametrize('size_a, size_b', [((4, 4), (2, 2)), ((5, 3), (3, 5)), ((1, 9), (7, 7)), ((13, 11), (12, 12))])
@pytest.mark.parametrize('backend', ['numpy', 'numba'])
def test_standardized_pairs_never_violate_contract(size_a, size_b, backend):
    merger = ImageMerger(backend=backend)
    try:
        output = merger.merge(make_image(*size_a, seed=1), make_image(*size_b, seed=2))
    except PixelContractError:
        pytest.fail("standardized images produced a malformed buffer")
    assert output.is_complete
    assert merger.stage is PipelineStage.ASSEMBLED


def test_decode_normalizes_to_rgba(tmp_path):
    Image.new('L', (3, 3), 128).save(tmp_path / 'grey.png')
    image, image_format = decode_image(tmp_path / 'grey.png')
    assert image_format == 'PNG'
    assert image.mode == 'RGBA'
    assert image.getpixel((0, 0)) == (128, 128, 128, 255)


def test_encode_writes_to_output_name(tmp_path):
    output = OutputImage(1, 1, str(tmp_path / 'single.png'))
    output.attach_data(bytes([1, 2, 3, 4]))
    written = encode_image(output, 'PNG')
    assert written == tmp_path / 'single.png'
    with Image.open(written) as image:
        assert image.getpixel((0, 0)) == (1, 2, 3, 4)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        merge_images(tmp_path / 'nope.png', tmp_path / 'nope2.png', tmp_path / 'out.png')


def test_invalid_backend():
    with pytest.raises(ValueError):
        ImageMerger(backend='gpu')


def test_read_only_format_rejected_before_saving(tmp_path):
    output = OutputImage(1, 1, str(tmp_path / 'x.psd'))
    output.attach_data(bytes([1, 2, 3, 4]))

    with pytest.raises(UnsupportedOutputFormat) as excinfo:
        encode_image(output, 'PSD')

    assert isinstance(excinfo.value, ImageDataError)
    assert excinfo.value.image_format == 'PSD'
    assert not (tmp_path / 'x.psd').exists()


def test_merge_images_output_format_override(tmp_path):
    make_image(4, 4, seed=1).save(tmp_path / 'a.png')
    make_image(2, 2, seed=2).save(tmp_path / 'b.png')

    merge_images(tmp_path / 'a.png', tmp_path / 'b.png', tmp_path / 'out.bmp', output_format='BMP', backend='numpy')

    with Image.open(tmp_path / 'out.bmp') as written:
        assert written.format == 'BMP'
        assert written.size == (2, 2)
