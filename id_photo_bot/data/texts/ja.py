# id_photo_bot/data/texts/ja.py
from .dto import LocaleTexts, BotCommandInfo, BotInfo, ButtonTexts

texts = LocaleTexts(
    commands=[
        BotCommandInfo(command="start", description="📸 証明写真を作成"),
        BotCommandInfo(command="cancel", description="↩️ 最初からやり直す"),
        BotCommandInfo(command="guide", description="💡 撮影ガイド"),
        BotCommandInfo(command="help", description="❓ サポート"),
    ],
    bot_info=BotInfo(
        short_description="AI証明写真メーカー ✨ スーツも背景も照明もワンタップで。",
        description=(
            "普段の写真をプロ品質の証明写真に変換します。✨\n\n"
            "ご自身の写真を送り、規格・背景色・服装を選ぶだけで、"
            "AIがスーツ・スタジオ照明・背景を仕上げます。"
        ),
    ),
    buttons=ButtonTexts(
        photo_standards={
            "resume": "履歴書",
            "passport": "パスポート",
            "my_number": "マイナンバーカード",
        },
        background_colors={
            "blue": "青",
            "white": "白",
            "gray": "グレー",
        },
        outfits={
            "male_suit": "男性用スーツ",
            "female_suit": "女性用スーツ",
        },
        beautify_on="✨ 自然な美顔補正: ON",
        beautify_off="自然な美顔補正: OFF",
        generate="🪄 証明写真を生成",
        retry="🔁 もう一度生成",
        new_photo="📸 別の写真",
        change_options="⚙️ オプションを変更",
    ),
    welcome=(
        "👋 ようこそ！お手持ちの写真からプロ品質の証明写真を作成します。\n\n"
        "正面を向いた鮮明な写真（JPEG または PNG）を送ってください。\n"
        "撮影のコツは /guide をご覧ください。"
    ),
    restart="最初からやり直しましょう。新しい写真を送ってください。",
    help="ご不明な点がございましたら、サポートまでご連絡ください: {email}",
    guide=(
        "<b>📷 撮影ガイド</b>\n\n"
        "<b>✅ 良い例 (OK)</b>\n"
        "• 正面を向いて、カメラをまっすぐ見る\n"
        "• 無表情、または自然な微笑み\n"
        "• 顔全体に均一に光が当たっている（影がない）\n"
        "• 背景は無地でスッキリしている\n"
        "• 顔や目元が髪で隠れていない\n"
        "• ピントが合っており、鮮明である\n\n"
        "<b>❌ 悪い例 (NG)</b>\n"
        "• 横顔や、顔が傾いている\n"
        "• 帽子、サングラス、マスクを着用\n"
        "• 顔に強い影がある、または逆光\n"
        "• 背景に物や柄が写り込んでいる\n"
        "• 歯が見えるほどの笑顔や変顔\n"
        "• 写真がピンボケしている、または画質が低い"
    ),
    send_photo_first="まず写真をアップロードしてください。",
    not_an_image="画像ファイル（JPEG, PNG）を送ってください。",
    unreadable_image="画像を読み込めませんでした。別の JPEG または PNG ファイルでお試しください。",
    options_prompt="写真を受け取りました！オプションを選んで<b>生成</b>を押してください。",
    generating="🪄 AIが証明写真を生成中です...",
    loading_messages=[
        "AIが最適なスーツを選んでいます...",
        "プロの照明を調整しています...",
        "顔の向きを補正しています...",
        "背景をきれいにしています...",
        "最後の仕上げを適用中です...",
    ],
    still_generating="現在生成中です。しばらくお待ちください。",
    result_caption="✅ {standard}用の証明写真ができました！\n印刷サイズ: {width}×{height} mm",
    unexpected_error="😔 不明なエラーにより写真の生成に失敗しました。しばらくしてから再度お試しください。",
    errors={
        "configuration": "APIキーが設定されていません。サポートまでご連絡ください。",
        "safety_blocked": "生成が安全ポリシーによりブロックされました。不適切な画像である可能性があります。",
        "empty_response": "AIから空のレスポンスが返されました。時間をおいて再度お試しください。",
        "provider_message": "AIからのメッセージ: {text}",
        "unknown_failure": "AIが画像を生成できませんでした。別の写真で試すか、設定を変更してください。",
        "transport_failure": "AIサービスに接続できませんでした。時間をおいて再度お試しください。",
        "invalid_input": "この写真または設定は使用できません。JPEGまたはPNG形式の画像を送信してください。",
    },
)
