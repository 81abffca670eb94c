"""Built-in word pools."""

from typing import Final, FrozenSet, List

CODENAMES_WORDS: Final[List[str]] = [
    'AFRICA', 'AGENT', 'AIR', 'ALIEN', 'ALPS', 'AMAZON', 'AMBULANCE', 'ANGEL',
    'ANTARCTICA', 'APPLE', 'ARM', 'ATLANTIS', 'BACK', 'BALL', 'BAND', 'BANK',
    'BAR', 'BARK', 'BAT', 'BATTERY', 'BEACH', 'BEAR', 'BEAT', 'BED', 'BELL',
    'BELT', 'BERLIN', 'BERMUDA', 'BERRY', 'BILL', 'BLOCK', 'BOARD', 'BOLT',
    'BOMB', 'BOND', 'BOOM', 'BOOT', 'BOTTLE', 'BOW', 'BOX', 'BRIDGE', 'BRUSH',
    'BUCK', 'BUFFALO', 'BUG', 'BUGLE', 'BUTTON', 'CALF', 'CANADA', 'CAP',
    'CAPITAL', 'CAR', 'CARD', 'CARROT', 'CASINO', 'CAST', 'CAT', 'CELL',
    'CENTAUR', 'CENTER', 'CHAIR', 'CHANGE', 'CHARGE', 'CHECK', 'CHEST', 'CHICK',
    'CHINA', 'CHOCOLATE', 'CHURCH', 'CIRCLE', 'CLIFF', 'CLOAK', 'CLUB', 'CODE',
    'COLD', 'COMIC', 'COMPOUND', 'CONCERT', 'CONDUCTOR', 'CONTRACT', 'COOK',
    'COPPER', 'COTTON', 'COURT', 'COVER', 'CRANE', 'CRASH', 'CRICKET', 'CROSS',
    'CROWN', 'CYCLE', 'CZECH', 'DANCE', 'DATE', 'DAY', 'DEATH', 'DECK', 'DEGREE',
    'DIAMOND', 'DICE', 'DINOSAUR', 'DISEASE', 'DOCTOR', 'DOG', 'DRAFT', 'DRAGON',
    'DRESS', 'DRILL', 'DROP', 'DUCK', 'DWARF', 'EAGLE', 'EGYPT', 'ENGINE',
    'ENGLAND', 'EUROPE', 'EYE', 'FACE', 'FAIR', 'FALL', 'FAN', 'FENCE', 'FIELD',
    'FIGHTER', 'FIGURE', 'FILE', 'FILM', 'FIRE', 'FISH', 'FLUTE', 'FLY', 'FOOT',
    'FORCE', 'FOREST', 'FORK', 'FRANCE', 'GAME', 'GAS', 'GENIUS', 'GERMANY',
    'GHOST', 'GIANT', 'GLASS', 'GLOVE', 'GOLD', 'GRACE', 'GRASS', 'GREECE',
    'GREEN', 'GROUND', 'HAM', 'HAND', 'HAWK', 'HEAD', 'HEART', 'HELICOPTER',
    'HIMALAYAS', 'HOLE', 'HOLLYWOOD', 'HONEY', 'HOOD', 'HOOK', 'HORN', 'HORSE',
    'HOSPITAL', 'HOTEL', 'ICE', 'INDIA', 'IRON', 'IVORY', 'JACK', 'JAM', 'JET',
    'JUPITER', 'KANGAROO', 'KETCHUP', 'KEY', 'KID', 'KING', 'KIWI', 'KNIFE',
    'KNIGHT', 'LAB', 'LAP', 'LASER', 'LAWYER', 'LEAD', 'LEMON', 'LEPRECHAUN',
    'LIFE', 'LIGHT', 'LIMOUSINE', 'LINE', 'LINK', 'LION', 'LITTER', 'LOCK',
    'LOG', 'LONDON', 'LUCK', 'MAIL', 'MAMMOTH', 'MAPLE', 'MARBLE', 'MARCH',
    'MASS', 'MATCH', 'MERCURY', 'MEXICO', 'MICROSCOPE', 'MILLIONAIRE', 'MINE',
    'MINT', 'MISSILE', 'MODEL', 'MOLE', 'MOON', 'MOSCOW', 'MOUNT', 'MOUSE',
    'MOUTH', 'MUG', 'NAIL', 'NEEDLE', 'NET', 'NIGHT', 'NINJA', 'NOTE', 'NOVEL',
    'NURSE', 'NUT', 'OCTOPUS', 'OIL', 'OLIVE', 'OLYMPUS', 'OPERA', 'ORANGE',
    'ORGAN', 'PALM', 'PAN', 'PANTS', 'PAPER', 'PARACHUTE', 'PARK', 'PART',
    'PASS', 'PASTE', 'PENGUIN', 'PHOENIX', 'PIANO', 'PIE', 'PILOT', 'PIN',
    'PIPE', 'PIRATE', 'PISTOL', 'PIT', 'PITCH', 'PLANE', 'PLASTIC', 'PLATE',
    'PLATYPUS', 'PLAY', 'PLOT', 'POINT', 'POISON', 'POLE', 'POLICE', 'POOL',
    'PORT', 'POST', 'POUND', 'PRESS', 'PRINCESS', 'PUMPKIN', 'PUPIL', 'PYRAMID',
    'QUEEN', 'RABBIT', 'RACKET', 'RAY', 'REVOLUTION', 'RING', 'ROBIN', 'ROBOT',
    'ROCK', 'ROME', 'ROOT', 'ROSE', 'ROULETTE', 'ROUND', 'ROW', 'RULER',
    'SATELLITE', 'SATURN', 'SCALE', 'SCHOOL', 'SCIENTIST', 'SCORPION', 'SCREEN',
    'SCUBA', 'SEAL', 'SERVER', 'SHADOW', 'SHAKESPEARE', 'SHARK', 'SHIP', 'SHOE',
    'SHOP', 'SHOT', 'SINK', 'SKYSCRAPER', 'SLIP', 'SLUG', 'SMUGGLER', 'SNOW',
    'SNOWMAN', 'SOCK', 'SOLDIER', 'SOUL', 'SOUND', 'SPACE', 'SPELL', 'SPIDER',
    'SPIKE', 'SPINE', 'SPOT', 'SPRING', 'SPY', 'SQUARE', 'STADIUM', 'STAFF',
    'STAR', 'STATE', 'STICK', 'STOCK', 'STRAW', 'STREAM', 'STRIKE', 'STRING',
    'SUB', 'SUIT', 'SUPERHERO', 'SWING', 'SWITCH', 'TABLE', 'TABLET', 'TAG',
    'TAIL', 'TAP', 'TEACHER', 'TELESCOPE', 'TEMPLE', 'THIEF', 'THUMB', 'TICK',
    'TIE', 'TIME', 'TOKYO', 'TOOTH', 'TORCH', 'TOWER', 'TRACK', 'TRAIN',
    'TRIANGLE', 'TRIP', 'TRUNK', 'TUBE', 'TURKEY', 'UNDERTAKER', 'UNICORN',
    'VACUUM', 'VAN', 'VET', 'WAKE', 'WALL', 'WAR', 'WASHER', 'WASHINGTON',
    'WATCH', 'WATER', 'WAVE', 'WEB', 'WELL', 'WHALE', 'WHIP', 'WIND', 'WITCH',
    'WORM', 'YARD',
]

# So Clover keywords: concrete nouns that make decent association fodder.
CLOVER_KEYWORDS: Final[List[str]] = [
    'BEAR', 'EAGLE', 'SHARK', 'WOLF', 'RABBIT', 'SNAKE', 'DOLPHIN', 'TIGER',
    'HORSE', 'SPIDER', 'WHALE', 'PARROT', 'PENGUIN', 'LION', 'MONKEY', 'OWL',
    'FROG', 'BUTTERFLY', 'CAT', 'DOG', 'ELEPHANT', 'FOX', 'CROW', 'BAT',
    'MOUSE', 'CHICKEN', 'DUCK', 'DEER', 'TURTLE', 'GOAT',
    'PIZZA', 'APPLE', 'CHEESE', 'CHOCOLATE', 'COFFEE', 'BREAD', 'HONEY',
    'LEMON', 'MUSHROOM', 'PEPPER', 'CHERRY', 'BANANA', 'GRAPE', 'COOKIE',
    'CAKE', 'ICE', 'SALT', 'SUGAR', 'BUTTER', 'STEAK', 'PASTA', 'TACO',
    'SUSHI', 'SOUP', 'BERRY', 'PEACH', 'MELON', 'OLIVE', 'CORN', 'ONION',
    'RICE', 'TEA', 'WINE', 'MILK', 'JUICE', 'CREAM',
    'MOUNTAIN', 'RIVER', 'OCEAN', 'FOREST', 'DESERT', 'ISLAND', 'VOLCANO',
    'THUNDER', 'RAINBOW', 'STORM', 'SUNSET', 'CLOUD', 'SNOW', 'RAIN',
    'WIND', 'FIRE', 'LAKE', 'BEACH', 'CAVE', 'CLIFF', 'JUNGLE', 'VALLEY',
    'WATERFALL', 'GARDEN', 'FIELD', 'FLOWER', 'TREE', 'ROCK', 'SAND',
    'WAVE', 'SKY', 'STAR', 'MOON', 'SUN', 'COMET', 'CRYSTAL',
    'HAMMER', 'MIRROR', 'CLOCK', 'KEY', 'CANDLE', 'LADDER', 'COMPASS',
    'ANCHOR', 'BELL', 'CHAIN', 'CROWN', 'SWORD', 'SHIELD', 'ROPE', 'LAMP',
    'BRUSH', 'NEEDLE', 'UMBRELLA', 'BASKET', 'BOTTLE', 'TELESCOPE', 'MAGNET',
    'WHEEL', 'BRIDGE', 'CASTLE', 'TOWER', 'PYRAMID', 'TEMPLE', 'PRISON',
    'SCHOOL', 'HOSPITAL', 'LIBRARY', 'MUSEUM', 'THEATER', 'STADIUM',
    'CIRCUS', 'MARKET', 'FARM', 'FACTORY', 'HARBOR', 'AIRPORT', 'STATION',
    'GUITAR', 'PIANO', 'DRUM', 'TRUMPET', 'VIOLIN', 'OPERA', 'BALLET',
    'ROBOT', 'ROCKET', 'SATELLITE', 'LASER', 'COMPUTER', 'PHONE', 'CAMERA',
    'RADIO', 'BATTERY', 'ENGINE', 'TRAIN', 'SHIP', 'PLANE', 'BICYCLE',
    'KING', 'QUEEN', 'KNIGHT', 'PIRATE', 'NINJA', 'WIZARD', 'GHOST', 'DRAGON',
    'GIANT', 'ANGEL', 'DOCTOR', 'CHEF', 'CLOWN', 'SOLDIER', 'DETECTIVE',
    'GOLD', 'SILVER', 'DIAMOND', 'PEARL', 'GLASS', 'PAPER', 'SILK', 'LEATHER',
    'WINTER', 'SUMMER', 'NIGHT', 'DREAM', 'MEMORY', 'SECRET', 'PARTY',
    'WEDDING', 'HOLIDAY', 'BIRTHDAY', 'GAME', 'PUZZLE', 'MAP', 'TREASURE',
]

# All valid two-letter words (TWL06 / OSPD5). Used as the dictionary of last
# resort when no word list file is configured.
TWO_LETTER_WORDS: Final[FrozenSet[str]] = frozenset([
    'AA', 'AB', 'AD', 'AE', 'AG', 'AH', 'AI', 'AL', 'AM', 'AN',
    'AR', 'AS', 'AT', 'AW', 'AX', 'AY',
    'BA', 'BE', 'BI', 'BO', 'BY',
    'DA', 'DE', 'DO',
    'ED', 'EF', 'EH', 'EL', 'EM', 'EN', 'ER', 'ES', 'ET', 'EW', 'EX',
    'FA', 'FE',
    'GI', 'GO',
    'HA', 'HE', 'HI', 'HM', 'HO',
    'ID', 'IF', 'IN', 'IS', 'IT',
    'JO',
    'KA', 'KI',
    'LA', 'LI', 'LO',
    'MA', 'ME', 'MI', 'MM', 'MO', 'MU', 'MY',
    'NA', 'NE', 'NO', 'NU',
    'OD', 'OE', 'OF', 'OH', 'OI', 'OK', 'OM', 'ON', 'OP', 'OR', 'OS', 'OU',
    'OW', 'OX', 'OY',
    'PA', 'PE', 'PI', 'PO',
    'QI',
    'RE',
    'SH', 'SI', 'SO',
    'TA', 'TI', 'TO',
    'UH', 'UM', 'UN', 'UP', 'US', 'UT',
    'WE', 'WO',
    'XI', 'XU',
    'YA', 'YE', 'YO',
    'ZA',
])
