# id_photo_bot/services/prompting/id_photo.py
from id_photo_bot.data.constants import (
    BACKGROUND_HEX,
    DEFAULT_BACKGROUND_HEX,
    DEFAULT_OUTFIT_DESCRIPTION,
    OUTFIT_DESCRIPTIONS,
)
from id_photo_bot.dto.id_photo import GenerationOptions, GenerationRequest, SourceImage

NO_BEAUTIFICATION_RULE = (
    "All forms of beautification, skin smoothing, or cosmetic filtering are strictly forbidden."
)

BEAUTIFICATION_INSTRUCTIONS = """
6.  **Subtle Beautification Adjustments (Enabled):**
    *   **Goal:** Apply very subtle, natural enhancements that improve photo quality without altering the subject's fundamental appearance. The subject must remain easily identifiable.
    *   **Natural Skin Retouching:** Gently smooth the skin texture to reduce the appearance of temporary blemishes, minor redness, or uneven skin tone. It is critical to **preserve permanent features** like moles, scars, and natural skin texture. The result should look like healthy skin, not an artificial or "airbrushed" filter.
    *   **Minor Symmetry Correction:** If necessary, make microscopic adjustments to facial symmetry, such as subtly balancing the height of eyebrows or eyes. These changes must be so minor that they are not immediately noticeable.
    *   **Eye Enhancement:** Slightly increase the sharpness and clarity of the irises to make the eyes look more awake and lively. Avoid unnatural brightening or color changes.
"""

PROMPT_ID_PHOTO = """
You are an expert AI photo editor specializing in professional headshots and official identification photos.
Your task is to transform the user's uploaded photo into a high-quality, regulation-compliant ID photo.

**Instructions:**

1.  **Attire Replacement:**
    *   Change the subject's clothing to a {outfit}.
    *   The clothing must look natural, fitting the subject's posture and body shape.
    *   Pay close attention to a seamless blend around the neck and shoulders.

2.  **Background Replacement:**
    *   Remove the original background entirely.
    *   Replace it with a smooth, uniform, solid-colored background with the hex code {background_hex}.

3.  **Composition and Framing:**
    *   The subject must be perfectly centered and facing directly forward.
    *   Adjust the head position to meet standard ID photo requirements (e.g., passport photos), ensuring there is appropriate headroom.
    *   Correct any minor head tilt to ensure the eye-line is horizontal.

4.  **Lighting and Image Quality:**
    *   Re-light the subject using a professional **three-point lighting setup (key, fill, and back lights)** to ensure the face is evenly illuminated without any harsh shadows, especially under the nose or eyes.
    *   The lighting should be soft and diffused, characteristic of a professional photo studio.
    *   Ensure there's a subtle **catchlight** in the eyes to add life and dimension.
    *   The final image must be of **ultra-high-resolution photorealistic quality**. Generate the final image with dimensions suitable for a high-resolution print (e.g., at least 1200x1600 pixels), equivalent to 300 DPI, to ensure it is optimized for professional-quality printing.
    *   The final image must be exceptionally sharp, clear, and free of any digital artifacts, blurriness, or compression noise.

5.  **Preserve Identity (Strict Constraint):**
    *   This is the most important rule. You must **not** alter the subject's core facial features (eyes, nose, mouth, face shape) in any way that would make them difficult to identify. The expression should remain neutral and professional.
{identity_rule}
{beautification}
**Final Output:**
The output must ONLY be the final, edited image file. Do not include any text, logos, or other information.
"""


def background_hex(color: str) -> str:
    """Hex code for a background color; unknown colors become white."""
    return BACKGROUND_HEX.get(color, DEFAULT_BACKGROUND_HEX)


def outfit_description(outfit: str) -> str:
    """English description of an outfit; unknown outfits become generic business attire."""
    return OUTFIT_DESCRIPTIONS.get(outfit, DEFAULT_OUTFIT_DESCRIPTION)


def build_instruction(options: GenerationOptions) -> str:
    """
    Composes the editing instruction for the image model.

    Pure function of the options: the same options always give the same text.
    """
    if options.beautify:
        identity_rule = ""
        beautification = BEAUTIFICATION_INSTRUCTIONS
    else:
        identity_rule = f"    *   {NO_BEAUTIFICATION_RULE}\n"
        beautification = ""

    return PROMPT_ID_PHOTO.format(
        outfit=outfit_description(options.outfit),
        background_hex=background_hex(options.background_color),
        identity_rule=identity_rule,
        beautification=beautification,
    )


def build_request(image: SourceImage, options: GenerationOptions) -> GenerationRequest:
    return GenerationRequest(
        image=image,
        options=options,
        instruction=build_instruction(options),
    )
