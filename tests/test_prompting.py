"""
Instruction text assembly for the image model.
"""

import pytest

from id_photo_bot.data.constants import BackgroundColor, MediaType, Outfit, PhotoStandard
from id_photo_bot.dto.id_photo import GenerationOptions, SourceImage
from id_photo_bot.services.prompting.id_photo import (
    BEAUTIFICATION_INSTRUCTIONS,
    NO_BEAUTIFICATION_RULE,
    background_hex,
    build_instruction,
    build_request,
    outfit_description,
)


class TestLookups:
    @pytest.mark.parametrize(
        "color, expected",
        [
            (BackgroundColor.BLUE, "#a0d8ef"),
            (BackgroundColor.WHITE, "#ffffff"),
            (BackgroundColor.GRAY, "#f0f0f0"),
            ("blue", "#a0d8ef"),
            ("purple", "#ffffff"),
        ],
    )
    def test_background_hex(self, color, expected):
        assert background_hex(color) == expected

    def test_outfit_descriptions(self):
        assert outfit_description(Outfit.MALE_SUIT) == (
            "dark-colored business suit with a white collared shirt and a simple tie"
        )
        assert outfit_description(Outfit.FEMALE_SUIT) == "dark-colored business suit with a white blouse"

    def test_unknown_outfit_falls_back(self):
        assert outfit_description("kimono") == "professional business attire"


class TestBuildInstruction:
    @pytest.mark.parametrize("color", list(BackgroundColor))
    def test_contains_background_hex(self, color):
        text = build_instruction(GenerationOptions(background_color=color))
        assert background_hex(color) in text

    @pytest.mark.parametrize("outfit", list(Outfit))
    def test_contains_outfit_phrase(self, outfit):
        text = build_instruction(GenerationOptions(outfit=outfit))
        assert f"Change the subject's clothing to a {outfit_description(outfit)}." in text

    def test_unknown_values_use_defaults(self):
        text = build_instruction(GenerationOptions(background_color="neon", outfit="pajamas"))
        assert "#ffffff" in text
        assert "professional business attire" in text

    def test_beautify_off_forbids_retouching(self):
        text = build_instruction(GenerationOptions(beautify=False))
        assert NO_BEAUTIFICATION_RULE in text
        assert BEAUTIFICATION_INSTRUCTIONS.strip() not in text
        assert "Subtle Beautification Adjustments" not in text

    def test_beautify_on_adds_block(self):
        text = build_instruction(GenerationOptions(beautify=True))
        assert BEAUTIFICATION_INSTRUCTIONS.strip() in text
        assert NO_BEAUTIFICATION_RULE not in text

    @pytest.mark.parametrize("beautify", [True, False])
    def test_mandatory_constraints_always_present(self, beautify):
        text = build_instruction(GenerationOptions(beautify=beautify))
        for fragment in (
            "Attire Replacement",
            "Remove the original background entirely",
            "perfectly centered and facing directly forward",
            "Correct any minor head tilt",
            "three-point lighting setup",
            "catchlight",
            "300 DPI",
            "eyes, nose, mouth, face shape",
        ):
            assert fragment in text

    def test_deterministic(self):
        options = GenerationOptions(
            photo_standard=PhotoStandard.PASSPORT,
            background_color=BackgroundColor.GRAY,
            outfit=Outfit.FEMALE_SUIT,
            beautify=True,
        )
        assert build_instruction(options) == build_instruction(options.model_copy())


class TestBuildRequest:
    def test_keeps_image_untouched(self, jpeg_bytes):
        image = SourceImage(data=jpeg_bytes, media_type=MediaType.JPEG)
        options = GenerationOptions(background_color=BackgroundColor.WHITE)

        request = build_request(image, options)

        assert request.image.data == jpeg_bytes
        assert request.image.media_type is MediaType.JPEG
        assert request.options == options
        assert request.instruction == build_instruction(options)

    def test_rejects_unsupported_media_type(self):
        with pytest.raises(ValueError):
            SourceImage(data=b"GIF89a", media_type="image/gif")
