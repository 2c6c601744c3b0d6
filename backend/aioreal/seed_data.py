"""Reference data loaded by ``flask db-reset``."""

# (url, category, description)
AI_IMAGES = [
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/277c0849-185c-4630-8a8e-843549fc9e79.jpg", "gaming", "AI gaming scene - Valorant"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/b621b729-ff94-496c-8156-684607dd007d.jpg", "gaming", "AI gaming scene - Valorant 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/7398cc83-b013-4f21-ad9a-6fa3ac69e351.jpg", "gaming", "AI gaming scene - League of Legends"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/ee09bd43-c058-403f-b8c1-cf713a35bf58.jpg", "gaming", "AI gaming scene - League of Legends 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/ae190ee1-4e06-4a68-a438-582e9323d5b6.jpg", "esports", "AI esports event"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/07e95886-079c-405a-807b-e21c9bd3cc03.jpg", "esports", "AI esports event 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/0dd36f0e-378e-47e2-8f26-522c9b7effb9.jpg", "portrait", "AI portrait - woman face"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/bd0663f2-c30c-4dab-ba0c-6a6516dd7e8b.jpg", "portrait", "AI portrait - woman face 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/c9af094c-0430-40cc-8885-dde4b20a88e4.jpg", "people", "AI romantic couple"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/8664a3e4-abb6-43d7-8eab-a662d012238e.jpg", "people", "AI romantic couple 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/8eba85f9-09a9-4055-ac12-9eecbfc75366.jpg", "nature", "AI rose flower"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/66f5038c-a6da-4596-8e73-dbf516a8bee9.jpg", "nature", "AI rose flower 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/47695132-b899-47bf-8743-f1fd101b0acd.jpg", "architecture", "AI modern house"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/25b79bac-bb03-4323-95db-a5cfd9d30a24.jpg", "military", "AI soldier"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/8ee64084-f924-40aa-8c9d-09b84e22830d.jpg", "military", "AI soldier 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/68c10a92-85d6-4b4f-8ca3-8865475efa80.jpg", "luxury", "AI private jet interior"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/aea71934-316a-45d4-a667-992765ea37a7.jpg", "luxury", "AI private jet interior 2"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/48bfbec2-b6a8-46b4-9228-e4c69c6d25fd.jpg", "nature", "AI forest scene"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/ai_image/61387c12-bff3-45d9-8d37-cfedd92c6812.jpg", "nature", "AI forest scene 2"),
]

# (url, category, source credit)
REAL_IMAGES = [
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/bride-8358737_1920.jpg", "people", "Pixabay - OlcayErtem"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/bride-9924693_1920.jpg", "people", "Pixabay - OlcayErtem"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/balinese-8097542_1920.jpg", "people", "Pixabay - Deddy_Sunarto"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/woman-5303971_1280.jpg", "people", "Pixabay - Tranvanquyet"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/contrast-5073265_1280.jpg", "architecture", "Pixabay - fietzfotos"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/lubeck-travemunde-5052446_1920.jpg", "architecture", "Pixabay - Kor_el_ya"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/poppies-5392907_1920.jpg", "nature", "Pixabay - thegermankid"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/flower-800752_1920.jpg", "nature", "Pixabay - TanteTati"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/gameboy-1143675_1920.jpg", "gaming", "Pixabay - Peggy_Marco"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/photo-1618193139062-2c5bf4f935b7.jpg", "gaming", "Unsplash - Erik Mclean"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/photo-1649425371492-78dc23abb424.jpg", "gaming", "Unsplash - Eugene Chystiakov"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/man-4207514_1920.jpg", "military", "Pixabay - Sammy-Sander"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/knight-9765068_1920.jpg", "military", "Pixabay - Raman_Spirydonau"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/woods-7661735_1920.jpg", "nature", "Pixabay - Strandkind_Muecke"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/forest-220719_1920.jpg", "nature", "Pixabay - DeltaWorks"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/food-1050813_1920.jpg", "food", "Pixabay - karriezhu"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/food-5981232_1920.jpg", "food", "Pixabay - romjanaly"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/owl-10077647_1920.jpg", "nature", "Pixabay - Nick4Fun"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/vietnam-6947339_1920.jpg", "people", "Pixabay - Chuotanhls"),
    ("https://s3.us-east-1.amazonaws.com/aiorreal.fun/not_ai_image/tree-9913930_1920.jpg", "nature", "Pixabay - wal_172619_II"),
]

# (name, ISO 3166-1 alpha-2 code)
COUNTRIES = [
    ('Argentina', 'AR'),
    ('Australia', 'AU'),
    ('Brazil', 'BR'),
    ('Cambodia', 'KH'),
    ('Canada', 'CA'),
    ('China', 'CN'),
    ('France', 'FR'),
    ('Germany', 'DE'),
    ('India', 'IN'),
    ('Indonesia', 'ID'),
    ('Italy', 'IT'),
    ('Japan', 'JP'),
    ('Laos', 'LA'),
    ('Malaysia', 'MY'),
    ('Mexico', 'MX'),
    ('Myanmar', 'MM'),
    ('Netherlands', 'NL'),
    ('Philippines', 'PH'),
    ('Singapore', 'SG'),
    ('South Korea', 'KR'),
    ('Spain', 'ES'),
    ('Sweden', 'SE'),
    ('Thailand', 'TH'),
    ('Turkey', 'TR'),
    ('United Kingdom', 'GB'),
    ('United States', 'US'),
    ('Vietnam', 'VN'),
]
