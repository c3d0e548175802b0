# id_photo_bot/data/texts/en.py
from .dto import LocaleTexts, BotCommandInfo, BotInfo, ButtonTexts

texts = LocaleTexts(
    commands=[
        BotCommandInfo(command="start", description="📸 Create a new ID photo"),
        BotCommandInfo(command="cancel", description="↩️ Start over"),
        BotCommandInfo(command="guide", description="💡 How to take a good photo"),
        BotCommandInfo(command="help", description="❓ Get help"),
    ],
    bot_info=BotInfo(
        short_description="AI ID photos ✨ Suit, background and lighting in one tap.",
        description=(
            "Turn a casual selfie into a professional ID photo. ✨\n\n"
            "Send me a photo of yourself, choose the standard, background and outfit, "
            "and my AI will do the rest: suit, studio lighting and a clean background."
        ),
    ),
    buttons=ButtonTexts(
        photo_standards={
            "resume": "Resume",
            "passport": "Passport",
            "my_number": "My Number card",
        },
        background_colors={
            "blue": "Blue",
            "white": "White",
            "gray": "Gray",
        },
        outfits={
            "male_suit": "Men's suit",
            "female_suit": "Women's suit",
        },
        beautify_on="✨ Natural retouch: ON",
        beautify_off="Natural retouch: OFF",
        generate="🪄 Generate ID photo",
        retry="🔁 Try again",
        new_photo="📸 New photo",
        change_options="⚙️ Change options",
    ),
    welcome=(
        "👋 Welcome! I turn your photo into a professional ID photo.\n\n"
        "Please send a clear, front-facing photo of yourself (JPEG or PNG).\n"
        "Not sure what works best? See /guide."
    ),
    restart="Alright, let's start fresh! Send me a new photo of yourself.",
    help="If you have any questions or need assistance, please contact our support team at: {email}",
    guide=(
        "<b>📷 Shooting guide</b>\n\n"
        "<b>✅ Good</b>\n"
        "• Facing forward, looking straight at the camera\n"
        "• Neutral expression or a natural smile\n"
        "• Even light on the whole face, no shadows\n"
        "• Plain, uncluttered background\n"
        "• Face and eyes not covered by hair\n"
        "• In focus and sharp\n\n"
        "<b>❌ Bad</b>\n"
        "• Profile view or tilted head\n"
        "• Hat, sunglasses or mask\n"
        "• Strong shadows on the face or backlight\n"
        "• Objects or patterns in the background\n"
        "• Big toothy smile or funny faces\n"
        "• Blurry or low-quality photo"
    ),
    send_photo_first="Please upload a photo first.",
    not_an_image="Please send an image file (JPEG or PNG).",
    unreadable_image="I couldn't read that image. Please try another JPEG or PNG file.",
    options_prompt="Great photo! Now choose your options and press <b>Generate</b>.",
    generating="🪄 Creating your ID photo...",
    loading_messages=[
        "Picking the best suit for you...",
        "Setting up professional lighting...",
        "Straightening your pose...",
        "Cleaning up the background...",
        "Applying the finishing touches...",
    ],
    still_generating="Your photo is still being generated, please wait.",
    result_caption="✅ Your {standard} photo is ready!\nPrint size: {width}×{height} mm.",
    unexpected_error=(
        "😔 Oops! Something went wrong on our end.\n\n"
        "Please try your request again in a few moments."
    ),
    errors={
        "configuration": "The AI service is not configured yet. Please contact support.",
        "safety_blocked": (
            "Generation was blocked by the safety policy. "
            "The image may be inappropriate, please try a different photo."
        ),
        "empty_response": "The AI returned an empty response. Please try again in a little while.",
        "provider_message": "Message from the AI: {text}",
        "unknown_failure": (
            "The AI could not generate a photo. "
            "Please try a different photo or change the options."
        ),
        "transport_failure": "Could not reach the AI service. Please try again in a few moments.",
        "invalid_input": "This photo or these options could not be used. Please send a JPEG or PNG image.",
    },
)
