"""
Word list for Terminal Wordle.
Answer words, all lowercase and five letters long, in a fixed shuffled order.
The daily game indexes this list by the number of days elapsed since the
epoch in wordle.py.
"""

WORDS = [
    "dirty", "lingo", "munch", "glean", "tidal", "scale", "grace", "probe",
    "abide", "islet", "faith", "lousy", "scram", "groan", "jazzy", "floss",
    "lunch", "spoke", "gummy", "jiffy", "gauze", "macho", "tonic", "heard",
    "joust", "grief", "mambo", "woman", "horny", "jumpy", "hippo", "manor",
    "binge", "muddy", "karma", "acorn", "maxim", "class", "newly", "kiosk",
    "lefty", "melee", "drunk", "occur", "kneed", "manga", "midge", "frock",
    "ought", "knoll", "motto", "minus", "idiom", "parka", "labor", "often",
    "molar", "metal", "perky", "lanky", "petal", "motel", "plane", "pixie",
    "lasso", "print", "mover", "salad", "polar", "laugh", "rapid", "murky",
    "sooth", "prism", "leant", "roost", "nasty", "thing", "purge", "least",
    "scrum", "aging", "which", "quota", "agony", "sight", "noise", "bluer",
    "smelt", "leper", "snide", "nutty", "coral", "snuck", "light", "squat",
    "oddly", "embed", "speck", "linen", "suite", "onset", "gland", "spool",
    "liver", "terra", "algae", "kayak", "stand", "lobby", "tread", "owing",
    "musty", "stock", "logic", "usage", "panic", "pulse", "stung", "loser",
    "welsh", "paste", "shaky", "sweet", "lowly", "zonal", "peach", "stead",
    "taker", "lumpy", "birch", "scald", "trunk", "tepee", "lurch", "bride",
    "scent", "baste", "zesty", "lyric", "chaff", "scout", "chili", "beard",
    "plier", "clung", "seedy", "drawn", "after", "plunk", "cubic", "seven",
    "freak", "blood", "poker", "dough", "shall", "idiot", "boxer", "poppy",
    "apply", "shawl", "minim", "broom", "pouch", "fiber", "shift", "polyp",
    "cable", "prawn", "frame", "shoot", "scion", "cedar", "pride", "gnash",
    "shrug", "spoon", "chirp", "prior", "hardy", "silly", "trail", "clerk",
    "prone", "impel", "skiff", "axion", "condo", "prove", "latch", "slant",
    "cleft", "fever", "psalm", "macaw", "slime", "earth", "flare", "asset",
    "moody", "slunk", "geeky", "focal", "purer", "odder", "anode", "junto",
    "frond", "pygmy", "petty", "snail", "amply", "gayly", "quark", "berry",
    "snoop", "quart", "glove", "queer", "realm", "solar", "shirk", "gravy",
    "quick", "rumor", "sower", "strip", "guild", "quite", "audit", "apron",
    "upset", "hazel", "rabid", "sleek", "spiel", "cabal", "month", "rainy",
    "speak", "split", "demur", "musky", "ramen", "stink", "spray", "float",
    "noose", "rarer", "taint", "staff", "horde", "opium", "rayon", "tooth",
    "array", "media", "paper", "bliss", "undid", "steal", "plump", "alone",
    "rebut", "waltz", "still", "scoff", "plant", "refer", "wryly", "stone",
    "eater", "brave", "retro", "foray", "widen", "scare", "blond", "right",
    "enema", "clove", "story", "badly", "bloom", "semen", "crumb", "stuff",
    "empty", "steep", "price", "bongo", "tough", "baler", "swill", "prize",
    "epoch", "pinto", "swift", "moral", "stain", "sever", "pulpy", "sworn",
    "entry", "hitch", "ester", "reign", "bossy", "equip", "horse", "evade",
    "coast", "toddy", "puppy", "filly", "loyal", "pound", "tweed", "quake",
    "drawl", "knave", "wrath", "vinyl", "teeth", "rover", "lover", "breed",
    "exalt", "chart", "brood", "putty", "blind", "swamp", "comic", "suave",
    "fella", "moult", "thrum", "inlay", "doing", "tacit", "onion", "timer",
    "feast", "event", "soggy", "viper", "femur", "tabby", "flaky", "south",
    "fetch", "white", "trade", "acute", "deity", "tamer", "chock", "click",
    "hello", "lance", "fifth", "crane", "clued", "afoot", "latte", "cabin",
    "crisp", "giver", "spied", "fleet", "shade", "query", "guard", "splat",
    "elegy", "swath", "creek", "gaffe", "stoic", "imbue", "token", "pubic",
    "camel", "marry", "abbot", "clank", "sleet", "tenth", "abate", "toast",
    "flora", "treat", "unzip", "smoky", "melon", "thumb", "utter", "utile",
    "flock", "prick", "strap", "knack", "royal", "throb", "ralph", "stunk",
    "flume", "manic", "ditch", "sheen", "enemy", "basil", "crock", "sulky",
    "thump", "mauve", "foist", "ovine", "dress", "catch", "medic", "forge",
    "boost", "sassy", "canoe", "grade", "weary", "remit", "batty", "swing",
    "about", "hotly", "grand", "abuse", "maize", "penne", "aping", "daunt",
    "choke", "nosey", "cower", "lumen", "gruel", "baton", "reedy", "piney",
    "savor", "drone", "repay", "retch", "crave", "ombre", "haste", "blast",
    "angle", "plead", "askew", "cease", "chick", "arson", "creme", "cacti",
    "holly", "curve", "thyme", "poser", "genie", "ideal", "cinch", "decal",
    "finch", "scowl", "icing", "assay", "chute", "privy", "patch", "lapse",
    "towel", "basal", "flake", "space", "issue", "warty", "wrist", "pupil",
    "state", "admin", "large", "caulk", "flick", "tasty", "kitty", "mulch",
    "chide", "skunk", "easel", "chill", "drama", "retry", "group", "vogue",
    "drier", "leery", "meaty", "flash", "livid", "thief", "giddy", "among",
    "pudgy", "stave", "modal", "parer", "eagle", "decay", "canal", "grove",
    "arise", "loamy", "alive", "endow", "lofty", "alter", "lunar", "count",
    "smirk", "stony", "afire", "beset", "email", "mound", "caper", "stole",
    "place", "buyer", "begin", "undue", "amaze", "rower", "older", "dozen",
    "aroma", "tweet", "stray", "shore", "kebab", "cloud", "delay", "await",
    "strut", "graft", "fishy", "pixel", "cocoa", "honey", "sport", "fetid",
    "delta", "bacon", "pesto", "heave", "cream", "mangy", "mushy", "mammy",
    "tilde", "forte", "sting", "party", "witty", "shame", "chief", "fjord",
    "snare", "enact", "tango", "dowdy", "movie", "track", "comfy", "husky",
    "blush", "cater", "buggy", "venue", "gamer", "stamp", "bleep", "decor",
    "gaudy", "whiny", "evict", "bigot", "organ", "ingot", "awake", "cutie",
    "sieve", "abort", "recap", "skirt", "frail", "agape", "hussy", "lying",
    "quote", "inbox", "rinse", "naval", "clamp", "aglow", "vapid", "flame",
    "quill", "sheik", "risky", "flint", "jetty", "cheap", "hefty", "reuse",
    "altar", "snout", "route", "along", "brink", "alpha", "sense", "abyss",
    "worse", "masse", "album", "twixt", "grant", "unfed", "coven", "dicey",
    "index", "screw", "cruel", "lever", "expel", "scuba", "shook", "verve",
    "stare", "hence", "shire", "lucid", "ashen", "basic", "above", "label",
    "amass", "creep", "parry", "unset", "shaft", "feral", "viola", "axial",
    "vista", "lusty", "quirk", "delve", "etude", "clink", "shrew", "lager",
    "sooty", "grimy", "polka", "crime", "armor", "child", "badge", "paddy",
    "bunny", "amber", "pecan", "gully", "pushy", "ounce", "debut", "steel",
    "pleat", "awoke", "phase", "yearn", "limit", "pinky", "actor", "stork",
    "court", "wimpy", "glade", "apart", "piety", "bloke", "boule", "silky",
    "couch", "sewer", "gaily", "thank", "pried", "brand", "usher", "agile",
    "local", "caddy", "prong", "demon", "gulch", "elope", "furor", "scold",
    "craze", "belch", "tried", "phone", "wound", "ovate", "sissy", "outer",
    "irony", "slink", "gipsy", "banjo", "slimy", "saute", "howdy", "slyly",
    "wafer", "brain", "slush", "ionic", "voter", "jaunt", "fungi", "pedal",
    "shied", "ninja", "wager", "sniff", "dairy", "scamp", "spasm", "plume",
    "clang", "spare", "vicar", "rouge", "sperm", "motor", "gloat", "trout",
    "niche", "dumpy", "pansy", "ditty", "avoid", "sling", "stove", "nerdy",
    "twirl", "eager", "homer", "urban", "tipsy", "liken", "upper", "allot",
    "halve", "valet", "steak", "quail", "vague", "rival", "slosh", "plate",
    "taunt", "ladle", "trial", "chess", "dusky", "virus", "salty", "ruddy",
    "waver", "agree", "teddy", "watch", "stair", "revel", "whack", "crier",
    "goody", "plaid", "octal", "vigil", "puree", "exert", "scree", "froze",
    "palsy", "raven", "cramp", "foamy", "adage", "shale", "blare", "fling",
    "bunch", "obese", "betel", "point", "snaky", "olden", "baron", "teach",
    "dodge", "frost", "octet", "gassy", "rogue", "smite", "rusty", "bluff",
    "taboo", "chore", "bagel", "crash", "pause", "erode", "enter", "grate",
    "shell", "wedge", "built", "shear", "tiger", "medal", "haven", "basis",
    "gross", "fauna", "where", "color", "derby", "gumbo", "frill", "shuck",
    "slick", "cavil", "short", "topaz", "disco", "shrub", "maybe", "sinew",
    "shorn", "trend", "minor", "hoard", "torus", "humus", "elate", "boney",
    "caste", "being", "ozone", "beast", "skimp", "cello", "final", "siren",
    "berth", "blame", "defer", "filet", "essay", "singe", "udder", "mossy",
    "gloom", "input", "drive", "scorn", "shave", "detox", "skill", "slice",
    "rajah", "cheat", "mealy", "squib", "cider", "fraud", "piggy", "filer",
    "trace", "brawl", "sleep", "vaunt", "amend", "gamut", "plumb", "aloof",
    "setup", "usurp", "filth", "flood", "envoy", "cameo", "smith", "savoy",
    "swear", "smart", "snore", "cabby", "dried", "locus", "wield", "small",
    "waste", "nicer", "clone", "sonic", "quell", "giant", "carve", "adorn",
    "drape", "moldy", "carol", "aphid", "tract", "churn", "anvil", "wagon",
    "covey", "bingo", "roomy", "hoist", "admit", "wiser", "nymph", "blank",
    "weedy", "riser", "devil", "girth", "neigh", "totem", "serif", "cycle",
    "dusty", "major", "jerky", "tramp", "adore", "steer", "cover", "bobby",
    "allay", "trait", "heist", "harsh", "krill", "froth", "stool", "gleam",
    "crone", "alloy", "folio", "tumor", "tryst", "spire", "saucy", "debit",
    "truer", "broke", "taken", "spine", "curvy", "bathe", "truck", "cluck",
    "grope", "leaky", "duvet", "tease", "board", "pesky", "field", "burst",
    "chard", "handy", "umbra", "tripe", "humor", "twine", "buxom", "ethic",
    "squad", "fault", "brick", "twice", "larva", "salve", "copse", "hurry",
    "cheer", "smack", "dream", "boast", "ultra", "shine", "hunky", "flown",
    "nasal", "rugby", "unmet", "morph", "arrow", "fluke", "flunk", "scary",
    "unlit", "emcee", "bring", "login", "lipid", "bowel", "orbit", "vapor",
    "abhor", "credo", "crest", "rigor", "metro", "valve", "droit", "quiet",
    "egret", "buddy", "pilot", "wooly", "inept", "equal", "elect", "groom",
    "lupus", "razor", "throw", "greet", "model", "brook", "macro", "blunt",
    "annoy", "civil", "guise", "adult", "amiss", "force", "unity", "begun",
    "vixen", "cling", "turbo", "viral", "helix", "ahead", "magma", "mimic",
    "verso", "booby", "pagan", "spiky", "prude", "fluid", "trove", "drake",
    "fence", "clasp", "award", "deuce", "ebony", "drank", "flyer", "slate",
    "video", "dryer", "sedan", "madam", "scone", "brute", "tonal", "fanny",
    "lemur", "oxide", "shirt", "grasp", "avert", "crack", "micro", "build",
    "bland", "uncut", "dowel", "inert", "noble", "proxy", "grout", "spelt",
    "whoop", "staid", "fight", "oaken", "filmy", "ruder", "dimly", "error",
    "sheep", "fruit", "kappa", "penal", "crook", "deter", "exult", "prime",
    "skate", "bulky", "missy", "swept", "climb", "parse", "spawn", "batch",
    "troll", "foggy", "craft", "slang", "mourn", "opine", "whiff", "vegan",
    "crump", "broil", "rumba", "limbo", "crick", "heart", "crank", "amuse",
    "dully", "yeast", "villa", "clean", "vodka", "fewer", "raise", "avian",
    "cheek", "aloud", "posse", "third", "omega", "kinky", "drown", "woody",
    "grave", "sandy", "growl", "pearl", "irate", "range", "hatch", "dwelt",
    "corny", "posit", "scrap", "crazy", "diner", "waive", "rebel", "blink",
    "guile", "spear", "mower", "iliac", "cried", "crush", "rehab", "ranch",
    "begat", "bilge", "chord", "gusto", "sigma", "billy", "dirge", "imply",
    "shunt", "rerun", "smear", "shock", "quash", "slept", "brash", "burnt",
    "drift", "avail", "shake", "skulk", "rider", "fluff", "level", "radio",
    "curly", "stint", "cumin", "grunt", "marsh", "favor", "black", "dwarf",
    "moose", "glare", "rearm", "frisk", "optic", "ovoid", "power", "truss",
    "serve", "maple", "knock", "brace", "mania", "gnome", "ether", "harem",
    "roger", "claim", "chaos", "cress", "riper", "wacky", "droll", "saint",
    "artsy", "suing", "decry", "rowdy", "downy", "spunk", "pasty", "spiny",
    "worth", "barge", "coach", "brawn", "theme", "bawdy", "ghost", "spoof",
    "found", "evoke", "gorge", "nylon", "slump", "finer", "swash", "trope",
    "mummy", "bible", "cross", "stash", "brass", "perch", "learn", "bleak",
    "manly", "wordy", "verge", "stein", "natal", "stout", "civic", "blurt",
    "chest", "afoul", "union", "erupt", "scope", "broad", "sloop", "knelt",
    "covet", "skier", "globe", "cairn", "crepe", "lapel", "guide", "sully",
    "segue", "trust", "heath", "mouse", "fixer", "folly", "nerve", "dolly",
    "scrub", "tense", "canon", "flank", "plain", "quoth", "louse", "whose",
    "flout", "crowd", "tardy", "angst", "rivet", "music", "merry", "milky",
    "sugar", "briar", "woven", "funky", "grail", "boozy", "wrote", "donor",
    "gawky", "stick", "tunic", "would", "shape", "trite", "ankle", "march",
    "juror", "patio", "tribe", "khaki", "bulge", "hater", "amble", "ample",
    "spree", "roast", "bench", "forgo", "swish", "hound", "chime", "mafia",
    "table", "belle", "apnea", "agent", "angry", "catty", "conch", "stuck",
    "ledge", "stall", "until", "ghoul", "scour", "laden", "edict", "decoy",
    "furry", "taste", "clash", "libel", "wispy", "drove", "check", "jelly",
    "crept", "tangy", "wheel", "hovel", "blown", "canny", "sneer", "smote",
    "elbow", "ocean", "mason", "golem", "butch", "match", "intro", "alien",
    "tarot", "terse", "trice", "drill", "mogul", "haute", "timid", "rally",
    "serum", "threw", "grime", "magic", "creak", "mucky", "plush", "lucky",
    "motif", "racer", "smile", "pluck", "drain", "biome", "share", "tower",
    "conic", "fifty", "widow", "queue", "prose", "grind", "shank", "coupe",
    "rebar", "dross", "taper", "thigh", "slash", "topic", "borax", "welch",
    "acrid", "piper", "mango", "bugle", "madly", "rebus", "spade", "booth",
    "papal", "total", "birth", "bicep", "reset", "ennui", "jolly", "puffy",
    "nurse", "unwed", "hedge", "crate", "dance", "rhyme", "tapir", "inter",
    "flier", "pinch", "crypt", "atone", "hobby", "faint", "shush", "fiery",
    "adobe", "steed", "grape", "cigar", "gaunt", "forth", "prowl", "alibi",
    "grass", "doubt", "spilt", "enjoy", "tulip", "eerie", "ready", "under",
    "house", "beefy", "fable", "aware", "farce", "mouth", "yield", "excel",
    "brine", "zebra", "first", "pooch", "girly", "ditto", "thorn", "pizza",
    "wreak", "chair", "sneak", "youth", "roach", "lorry", "hairy", "curse",
    "stack", "mayor", "leafy", "geese", "abled", "elfin", "stake", "voice",
    "daddy", "inner", "nadir", "cliff", "biddy", "aisle", "carry", "savvy",
    "forty", "knife", "safer", "fetal", "caput", "gripe", "scaly", "dogma",
    "fudge", "peace", "exist", "borne", "brunt", "stunt", "woozy", "frown",
    "sober", "stoke", "brake", "noisy", "ember", "stomp", "butte", "cache",
    "valid", "tacky", "audio", "stiff", "amity", "front", "store", "flack",
    "joint", "croup", "fairy", "flute", "purse", "dunce", "hippy", "whine",
    "maker", "femme", "study", "shown", "lemon", "below", "taffy", "stump",
    "crude", "false", "scant", "unite", "super", "bleed", "annul", "hydro",
    "offer", "spicy", "twist", "revue", "cacao", "lilac", "plied", "angel",
    "debug", "alert", "shalt", "moist", "guppy", "sloth", "gayer", "hyper",
    "surer", "gecko", "gusty", "layer", "blimp", "swirl", "jumbo", "flush",
    "piece", "today", "swoon", "abbey", "habit", "dwell", "voila", "dealt",
    "synod", "brief", "wharf", "inane", "known", "charm", "satin", "clump",
    "hover", "stern", "diary", "spout", "porch", "matey", "never", "whisk",
    "satyr", "outgo", "belie", "lithe", "since", "needy", "radii", "theft",
    "cynic", "might", "fussy", "spurn", "agate", "swore", "world", "erect",
    "choir", "loopy", "golly", "edify", "liege", "river", "fuzzy", "newer",
    "write", "risen", "harpy", "renew", "tenor", "elude", "ruler", "alley",
    "refit", "extra", "quack", "eclat", "aorta", "money", "hilly", "daisy",
    "bushy", "tonga", "spell", "fatty", "teary", "freer", "payer", "aloft",
    "sixty", "clack", "tithe", "early", "night", "dutch", "quest", "havoc",
    "cadet", "frank", "opera", "epoxy", "vomit", "droop", "snack", "beech",
    "swami", "woken", "ripen", "fugue", "mocha", "brush", "elide", "goose",
    "rocky", "spend", "plait", "miner", "while", "speed", "otter", "peril",
    "myrrh", "banal", "width", "burly", "aback", "crawl", "sauna", "dummy",
    "fiend", "gamma", "nomad", "booty", "dally", "trawl", "repel", "gauge",
    "dilly", "willy", "mirth", "tulle", "wrong", "bound", "winch", "image",
    "befit", "bonus", "shout", "fizzy", "death", "hotel", "baker", "clout",
    "randy", "colon", "corer", "scoop", "pouty", "greed", "theta", "worry",
    "recur", "axiom", "those", "depth", "merge", "sushi", "legal", "circa",
    "meter", "blaze", "unify", "pence", "bison", "stoop", "titan", "daily",
    "leave", "score", "paint", "payee", "mange", "photo", "seize", "heavy",
    "anime", "tiara", "liner", "shelf", "gypsy", "press", "creed", "renal",
    "ethos", "novel", "fetus", "bough", "using", "elder", "steam", "glyph",
    "augur", "midst", "atoll", "sepia", "rupee", "ninny", "exile", "aider",
    "flesh", "dense", "wider", "ardor", "alarm", "flirt", "rough", "moron",
    "green", "swine", "abase", "relax", "argue", "ivory", "verse", "chunk",
    "clown", "trump", "depot", "title", "siege", "sweep", "venom", "spent",
    "deign", "mecca", "rural", "triad", "gruff", "cleat", "vigor", "aunty",
    "wring", "piano", "joist", "bused", "crimp", "friar", "surge", "sorry",
    "graph", "sixth", "fritz", "tutor", "cloak", "wooer", "bravo", "flour",
    "dryly", "lodge", "witch", "digit", "naive", "lathe", "guava", "bless",
    "mucus", "itchy", "dingo", "slide", "smell", "swarm", "reply", "swung",
    "rouse", "spank", "feign", "cyber", "gourd", "yacht", "salvo", "infer",
    "allow", "patsy", "preen", "awash", "beady", "mamma", "queen", "scarf",
    "usual", "bribe", "wince", "regal", "bloat", "spurt", "plaza", "sauce",
    "whole", "focus", "arbor", "penny", "nobly", "china", "graze", "radar",
    "toxin", "slope", "stage", "touch", "outdo", "brisk", "tempo", "tying",
    "pique", "grill", "hutch", "bully", "coyly", "chain", "tuber", "tawny",
    "igloo", "balmy", "booze", "overt", "olive", "cagey", "cobra", "reach",
    "sharp", "tibia", "inlet", "flung", "north", "shack", "scalp", "awful",
    "apple", "cause", "shyly", "glass", "leapt", "chuck", "cloth", "spore",
    "thong", "shove", "dingy", "mural", "skull", "eying", "dandy", "tatty",
    "sound", "fancy", "other", "slurp", "twang", "vying", "robin", "guest",
    "rigid", "stale", "denim", "fried", "spoil", "spook", "weave", "toxic",
    "poesy", "picky", "chose", "proud", "happy", "slack", "visit", "their",
    "juice", "style", "chasm", "order", "smock", "paler", "trash", "carat",
    "gonad", "merit", "donut", "drink", "datum", "miser", "rodeo", "abode",
    "knead", "chump", "azure", "windy", "valor", "brown", "broth", "quilt",
    "croak", "sumac", "sappy", "loath", "every", "truth", "syrup", "whelp",
    "crass", "there", "later", "chafe", "train", "erase", "bayou", "clock",
    "chalk", "eaten", "druid", "leach", "waxen", "spark", "candy", "icily",
    "guess", "think", "attic", "fleck", "bread", "heady", "bleat", "annex",
    "chant", "proof", "break", "modem", "tweak", "nudge", "shoal", "grown",
    "round", "sally", "sadly", "truly", "shone", "hinge", "ensue", "shark",
    "vowel", "tight", "fatal", "dodgy", "adapt", "incur", "antic", "great",
    "judge", "talon", "navel", "duchy", "prune", "patty", "exact", "phony",
    "scene", "soapy", "loose", "chase", "torso", "bevel", "gazer", "snuff",
    "ratio", "spite", "could", "affix", "rabbi", "diver", "flask", "value",
    "torch", "guilt", "panel", "sweat", "slain", "going", "beget", "testy",
    "swell", "lunge", "start", "began", "vivid", "fully", "gooey", "cough",
    "sword", "pithy", "beret", "relay", "clear", "primo", "visor", "shady",
    "aptly", "foyer", "flail", "braid", "trick", "curry", "three", "funny",
    "haunt", "forum", "bitty", "dizzy", "prank", "gouge", "floor", "ascot",
    "harry", "gloss", "rotor", "curio", "fresh", "adept", "snowy", "sonar",
    "water", "rifle", "diode", "fecal", "whirl", "salon", "sheet", "weigh",
    "these", "sprig", "shard", "robot", "humph", "leggy", "wheat", "eight",
    "owner", "briny", "straw", "adopt", "wight", "resin", "anger", "saner",
    "ficus", "solve", "uncle", "drool", "snarl", "niece", "baggy", "tally",
    "rhino", "eject", "stank", "pivot", "genre", "hasty", "jewel", "mount",
    "untie", "worst", "spice", "crust", "lease", "vault", "plank", "urine",
    "stood", "groin", "goner", "ratty", "leech", "ovary", "bezel", "botch",
    "joker", "glory", "sheer", "ferry", "offal", "mercy", "pasta", "honor",
    "wrest", "punch", "showy", "vital", "kneel", "dread", "surly", "arose",
    "react", "stark", "tepid", "pitch", "dying", "bylaw", "stalk", "given",
    "lurid", "flair", "basin", "snake", "meant", "cargo", "close", "ulcer",
    "freed", "crown", "wrack", "dowry", "ninth", "weird", "wrung", "draft",
    "goofy", "recut", "sunny", "swoop", "storm", "blade", "notch", "shiny",
    "bosom", "snipe", "aside", "spill", "juicy", "elite", "hyena", "wreck",
    "troop", "dopey", "whale", "gavel", "spike", "snort", "unfit", "minty",
    "llama", "salsa", "koala", "nanny", "arena", "idyll", "eking", "relic",
    "block", "extol", "beach", "glint", "ridge", "junta", "tubal", "smash",
    "smoke", "hymen", "humid", "thick", "human", "leash", "again", "grain",
    "solid", "lymph", "vocal", "blurb", "raspy", "lower", "budge", "blitz",
    "debar", "champ", "slung", "comma", "waist", "align", "comet", "heron",
    "mince", "tenet", "truce", "glaze", "women", "belly", "stilt", "glide",
    "quasi", "crony", "hunch", "godly", "alike", "blend", "facet", "qualm",
    "vouch", "young", "poise", "idler", "felon",
]
