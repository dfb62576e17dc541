"""
Event deck for Ecclesia
A Christian community in southern Gaul, 112 CE to the end of the western empire

Each event includes:
- Era and year hint
- Narrative and scene metadata
- Choices with reflection prompts, requirements and weighted outcomes

Micro-events are small beats revealed during the pause between decisions.
"""

from content import GameDeck

SCENE_IMAGE = "/assets/scene-overview.png"

ERA_TABLE = {
    "eras": ["founding", "persecution", "imperial", "fading"],
    # founding: 100-200; persecution: 200-313; imperial: 313-430; fading: 430-500
    "year_boundaries": [200, 313, 430],
    "count_thresholds": [4, 8, 12],
    "min_year_steps": [1, 3, 5, 8],
    "status_bands": [
        [150, "Localized Suspicion"],
        [250, "Localized Persecution"],
        [313, "Anxious Tolerance"],
        [380, "Imperial Favor"],
    ],
    "final_status": "Provincial Integration",
}

EVENTS = [
    # ═════════════════════════════════════════════════════════════════════
    # FOUNDING
    # ═════════════════════════════════════════════════════════════════════
    {
        "id": "founding-agape",
        "era": "founding",
        "year_hint": 112,
        "intro": True,
        "title": "Who Joins the Table?",
        "narrative": (
            "Merchants from Massilia offer to host a public agape feast if the community "
            "will bless their caravans. Elders worry it blurs the line between sacrament "
            "and spectacle."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "The Olive Court",
        "scene_caption": (
            "Stone walls keep the summer heat at bay while elders debate whether "
            "hospitality risks imperial attention."
        ),
        "choices": [
            {
                "id": "founding-private",
                "label": "Keep the celebration private and focused on discipleship.",
                "reflection": {
                    "prompt": "Why do the elders resist a public feast?",
                    "options": [
                        "They fear syncretism and doctrinal confusion.",
                        "They dislike food shared with merchants.",
                        "They hope to attract Roman officials.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "founding-private-a",
                            "description": (
                                "The gathering deepens trust. A few curious onlookers drift "
                                "away, but the flock feels anchored."
                            ),
                            "effects": {"cohesion": 8, "members": -3},
                            "year_advance": 38,
                            "sound_effect": "chant",
                        },
                        "weight": 7,
                    },
                    {
                        "value": {
                            "id": "founding-private-b",
                            "description": (
                                "Merchants spread rumors that Christians refuse outsiders. "
                                "Curiosity cools for now."
                            ),
                            "effects": {"cohesion": 4, "influence": -2},
                            "year_advance": 34,
                            "sound_effect": "quiet",
                        },
                        "weight": 3,
                    },
                ],
            },
            {
                "id": "founding-open",
                "label": "Accept the offer and bless the feast openly.",
                "reflection": {
                    "prompt": "What is the primary risk of opening the agape feast?",
                    "options": [
                        "Imperial agents may notice a growing movement.",
                        "There will not be enough food.",
                        "Merchants will demand membership.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "founding-open-a",
                            "description": (
                                "Crowds enjoy the generosity. A magistrate takes note, but "
                                "leaves with a curious smile."
                            ),
                            "effects": {"members": 12, "cohesion": -4, "influence": 3},
                            "year_advance": 42,
                            "sound_effect": "crowd",
                            "tags_add": ["merchant_patrons"],
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "founding-open-b",
                            "description": (
                                "A Stoic tutor argues publicly with your presbyters about "
                                "resurrection. Imperial scribes record every word."
                            ),
                            "effects": {"members": 6, "cohesion": -8},
                            "year_advance": 40,
                            "sound_effect": "crowd",
                        },
                        "weight": 4,
                    },
                ],
            },
        ],
    },
    {
        "id": "widows-fund",
        "era": "founding",
        "year_hint": 138,
        "title": "The Widows' Chest",
        "narrative": (
            "The deacons keep a chest for widows and orphans. A caravan master offers to "
            "double it, provided his name is read aloud at every gathering."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "The Deacons' Room",
        "scene_caption": "Ledgers, lamp oil and a locked cedar chest.",
        "choices": [
            {
                "id": "widows-accept-patron",
                "label": "Accept the gift and honor the patron by name.",
                "requirements": {"required_tags": ["merchant_patrons"]},
                "reflection": {
                    "prompt": "What does public naming of a donor risk?",
                    "options": [
                        "Charity begins to look like purchased status.",
                        "The chest will be too heavy to carry.",
                        "Widows will refuse the aid.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "widows-accept-patron-a",
                            "description": "The chest fills. Some grumble that piety now has a price list.",
                            "effects": {"resources": 12, "cohesion": -3},
                            "year_advance": 45,
                            "sound_effect": "crowd",
                        },
                        "weight": 7,
                    },
                    {
                        "value": {
                            "id": "widows-accept-patron-b",
                            "description": "The patron's rivals take offense and close their stalls to your members.",
                            "effects": {"resources": 6, "influence": -3},
                            "year_advance": 45,
                            "sound_effect": "quiet",
                        },
                        "weight": 3,
                    },
                ],
            },
            {
                "id": "widows-collect",
                "label": "Ask every household for a small weekly offering instead.",
                "reflection": {
                    "prompt": "Why spread the burden across households?",
                    "options": [
                        "Shared giving binds the community to its poor.",
                        "Roman law forbids large gifts.",
                        "Merchants cannot be baptized.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "widows-collect-a",
                            "description": "Coins trickle in from every street. The poor know whose care this is.",
                            "effects": {"resources": 5, "cohesion": 6},
                            "year_advance": 48,
                            "sound_effect": "chant",
                        },
                        "weight": 8,
                    },
                    {
                        "value": {
                            "id": "widows-collect-b",
                            "description": "A lean harvest empties purses. The chest stays light.",
                            "effects": {"resources": 1, "members": -2},
                            "year_advance": 44,
                            "sound_effect": "quiet",
                        },
                        "weight": 2,
                    },
                ],
            },
        ],
    },
    {
        "id": "gnostic-poet",
        "era": "founding",
        "year_hint": 174,
        "title": "The Gnostic Poet",
        "narrative": (
            "Marcus tours the region with hymns that whisper of a hidden god beyond the "
            "creator. Artisans love his poetry; catechists fear doctrinal drift."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "Twilight Vigil",
        "scene_caption": (
            "Lanterns throw long shadows across the half-built basilica as debates rise "
            "about beauty and truth."
        ),
        "choices": [
            {
                "id": "gnostic-dismiss",
                "label": "Excommunicate Marcus and denounce his teachings.",
                "reflection": {
                    "prompt": "What motivates the sharp response?",
                    "options": [
                        "Protecting doctrinal cohesion in a fragile season.",
                        "Desire for imperial approval.",
                        "Jealousy over Marcus's musical skill.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "gnostic-dismiss-a",
                            "description": (
                                "The community knows where you stand. Some artists depart "
                                "with Marcus, but the core remains steady."
                            ),
                            "effects": {"cohesion": 12, "members": -10},
                            "year_advance": 46,
                            "sound_effect": "chant",
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "gnostic-dismiss-b",
                            "description": "Marcus forms a rival circle downriver. Families split.",
                            "effects": {"cohesion": -10, "members": -18},
                            "year_advance": 42,
                            "sound_effect": "quiet",
                            "tags_add": ["rival_circle"],
                        },
                        "weight": 4,
                    },
                ],
            },
            {
                "id": "gnostic-adapt",
                "label": "Retain his hymns but preach against the dualist theology.",
                "reflection": {
                    "prompt": "What tension does this compromise invite?",
                    "options": [
                        "Artistic language can blur doctrinal clarity.",
                        "Imperial law forbids hymn adaptations.",
                        "Musicians dislike learning new lyrics.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "gnostic-adapt-a",
                            "description": (
                                "Catechists rewrite the hymns. Young artisans stay engaged "
                                "and ask sharper questions."
                            ),
                            "effects": {"cohesion": 6, "members": 8},
                            "year_advance": 44,
                            "sound_effect": "chant",
                        },
                        "weight": 5,
                    },
                    {
                        "value": {
                            "id": "gnostic-adapt-b",
                            "description": (
                                "Despite sermons, whispers persist that the body is a prison. "
                                "Some catechumens drift away."
                            ),
                            "effects": {"cohesion": -6, "members": -4},
                            "year_advance": 40,
                            "sound_effect": "quiet",
                        },
                        "weight": 5,
                    },
                ],
            },
        ],
    },
    # ═════════════════════════════════════════════════════════════════════
    # PERSECUTION
    # ═════════════════════════════════════════════════════════════════════
    {
        "id": "decian-libelli",
        "era": "persecution",
        "year_hint": 250,
        "title": "The Certificates of Sacrifice",
        "narrative": (
            "Decius orders every household to sacrifice before a magistrate and carry a "
            "signed libellus. A clerk hints that certificates can be bought without the act."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "The Forum Steps",
        "scene_caption": "A brazier smokes beside a table of blank certificates.",
        "choices": [
            {
                "id": "libelli-refuse",
                "label": "Forbid the certificates. Stand openly and accept the cost.",
                "reflection": {
                    "prompt": "Why do many leaders forbid even bought certificates?",
                    "options": [
                        "Buying one still denies the faith in public record.",
                        "The certificates are too expensive.",
                        "Magistrates never honor them.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "libelli-refuse-a",
                            "description": "Arrests follow. The courage of the confessors becomes a story told for years.",
                            "effects": {"members": -14, "cohesion": 10, "influence": 4},
                            "year_advance": 40,
                            "sound_effect": "chant",
                            "tags_add": ["confessors"],
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "libelli-refuse-b",
                            "description": "Fear scatters many households. The faithful remnant gathers in cellars.",
                            "effects": {"members": -22, "cohesion": 4},
                            "year_advance": 38,
                            "sound_effect": "quiet",
                            "tags_add": ["confessors"],
                        },
                        "weight": 4,
                    },
                ],
            },
            {
                "id": "libelli-tolerate",
                "label": "Quietly tolerate bought certificates to protect families.",
                "reflection": {
                    "prompt": "What will this leniency leave behind?",
                    "options": [
                        "A bitter dispute over readmitting the lapsed.",
                        "A surplus of incense.",
                        "Friendship with the emperor.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "libelli-tolerate-a",
                            "description": "Households survive intact, but the confessors look on in silence.",
                            "effects": {"members": 4, "cohesion": -10, "resources": -6},
                            "year_advance": 38,
                            "sound_effect": "quiet",
                            "tags_add": ["lapsed"],
                        },
                        "weight": 7,
                    },
                    {
                        "value": {
                            "id": "libelli-tolerate-b",
                            "description": "An informer exposes the scheme. Fines drain the common purse.",
                            "effects": {"resources": -14, "cohesion": -6},
                            "year_advance": 36,
                            "sound_effect": "crowd",
                            "tags_add": ["lapsed"],
                        },
                        "weight": 3,
                    },
                ],
            },
        ],
    },
    {
        "id": "lapsed-return",
        "era": "persecution",
        "year_hint": 258,
        "title": "The Lapsed at the Door",
        "narrative": (
            "The persecution eases. Those who sacrificed or bought certificates ask to "
            "return. The confessors who suffered want a voice in the terms."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "The House Church",
        "scene_caption": "Penitents wait outside in sackcloth while the assembly argues within.",
        "choices": [
            {
                "id": "lapsed-penance",
                "label": "Readmit the lapsed after a season of public penance.",
                "reflection": {
                    "prompt": "What does a period of penance try to balance?",
                    "options": [
                        "Mercy for the weak and honor for those who suffered.",
                        "The treasury and the building fund.",
                        "Roman and Greek liturgies.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "lapsed-penance-a",
                            "description": "Families reunite at the table. The confessors bless the returnees.",
                            "effects": {"members": 16, "cohesion": 6},
                            "year_advance": 42,
                            "sound_effect": "chant",
                            "tags_remove": ["lapsed"],
                        },
                        "weight": 7,
                    },
                    {
                        "value": {
                            "id": "lapsed-penance-b",
                            "description": "A rigorist faction walks out, calling the assembly soft.",
                            "effects": {"members": 8, "cohesion": -8},
                            "year_advance": 40,
                            "sound_effect": "crowd",
                            "tags_remove": ["lapsed"],
                        },
                        "weight": 3,
                    },
                ],
            },
            {
                "id": "lapsed-confessors-decide",
                "label": "Let the confessors judge each case.",
                "requirements": {"required_tags": ["confessors"], "min_cohesion": 40},
                "reflection": {
                    "prompt": "Where does authority shift if confessors decide?",
                    "options": [
                        "From ordained clergy to those who suffered.",
                        "From the emperor to the governor.",
                        "From the deacons to the merchants.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "lapsed-confessors-a",
                            "description": "Judgments are strict but respected. The community heals slowly.",
                            "effects": {"members": 6, "cohesion": 10},
                            "year_advance": 44,
                            "sound_effect": "chant",
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "lapsed-confessors-b",
                            "description": "Bishops elsewhere object. Letters of rebuke arrive from Rome.",
                            "effects": {"influence": -6, "cohesion": 2},
                            "year_advance": 42,
                            "sound_effect": "quiet",
                        },
                        "weight": 4,
                    },
                ],
            },
        ],
    },
    # ═════════════════════════════════════════════════════════════════════
    # IMPERIAL
    # ═════════════════════════════════════════════════════════════════════
    {
        "id": "basilica-patronage",
        "era": "imperial",
        "year_hint": 330,
        "title": "A Basilica for the City",
        "narrative": (
            "With Constantine's favor, a senatorial widow offers land for a basilica. "
            "Her architect proposes marble; the deacons propose a hospice."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "The Survey Stakes",
        "scene_caption": "Cords stretch across an empty lot beside the old forum.",
        "choices": [
            {
                "id": "basilica-marble",
                "label": "Commission a marble apse worthy of imperial visitors.",
                "requirements": {"min_resources": 40},
                "reflection": {
                    "prompt": "What does a grand building signal in this era?",
                    "options": [
                        "The church's new place in civic life.",
                        "A return to house churches.",
                        "Hostility toward the emperor.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "basilica-marble-a",
                            "description": "Officials attend the dedication. The city notices your community.",
                            "effects": {"resources": -20, "influence": 14, "members": 20},
                            "year_advance": 50,
                            "sound_effect": "construction",
                            "tags_add": ["imperial_patronage"],
                        },
                        "weight": 7,
                    },
                    {
                        "value": {
                            "id": "basilica-marble-b",
                            "description": "Costs overrun. Half-built columns stand for years.",
                            "effects": {"resources": -28, "cohesion": -6},
                            "year_advance": 55,
                            "sound_effect": "construction",
                        },
                        "weight": 3,
                    },
                ],
            },
            {
                "id": "basilica-hospice",
                "label": "Build a modest hall with a hospice for the sick.",
                "reflection": {
                    "prompt": "Why might a hospice win more members than marble?",
                    "options": [
                        "Visible care reaches those the city ignores.",
                        "Hospices are tax-exempt.",
                        "Marble is forbidden to Christians.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "basilica-hospice-a",
                            "description": "Fevers break under the deacons' care. Whole streets ask for baptism.",
                            "effects": {"members": 30, "resources": -10, "cohesion": 6},
                            "year_advance": 48,
                            "sound_effect": "crowd",
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "basilica-hospice-b",
                            "description": "The widow withdraws part of her gift, disappointed by the plain design.",
                            "effects": {"members": 12, "resources": -4, "influence": -4},
                            "year_advance": 52,
                            "sound_effect": "quiet",
                        },
                        "weight": 4,
                    },
                ],
            },
        ],
    },
    {
        "id": "bacaudae-uprising",
        "era": "imperial",
        "year_hint": 390,
        "title": "The Bacaudae Uprising",
        "narrative": (
            "Desperate peasants torch aristocratic villas outside Arles. Landowners demand "
            "a condemnation; deacons see refugees who need shelter."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "Consecration Morning",
        "scene_caption": (
            "The basilica is nearly complete, yet smoke on the horizon reminds everyone of "
            "the fragile peace."
        ),
        "choices": [
            {
                "id": "bacaudae-condemn",
                "label": "Condemn the uprising and champion Roman order.",
                "reflection": {
                    "prompt": "Which relationship does this choice strengthen?",
                    "options": [
                        "Patronage with elite households",
                        "Solidarity with refugees",
                        "Ties to rural peasants",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "bacaudae-condemn-a",
                            "description": (
                                "Senatorial families pledge funds for the basilica. Poor "
                                "members whisper that the church has forgotten its roots."
                            ),
                            "effects": {"resources": 6, "cohesion": -12},
                            "year_advance": 45,
                            "sound_effect": "construction",
                        },
                        "weight": 7,
                    },
                    {
                        "value": {
                            "id": "bacaudae-condemn-b",
                            "description": (
                                "Rumors of betrayal spread. A splinter cell forms a house "
                                "church focusing on the poor."
                            ),
                            "effects": {"cohesion": -18, "members": -12},
                            "year_advance": 42,
                            "sound_effect": "quiet",
                        },
                        "weight": 3,
                    },
                ],
            },
            {
                "id": "bacaudae-relief",
                "label": "Fund relief for all victims, aristocrats and peasants alike.",
                "requirements": {"min_resources": 15},
                "reflection": {
                    "prompt": "What cost accompanies this broad charity?",
                    "options": [
                        "Financial strain and volunteer fatigue",
                        "Imperial censure",
                        "Loss of architectural plans",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "bacaudae-relief-a",
                            "description": (
                                "Your reputation for justice expands. Coffers dip, but new "
                                "catechumens arrive from every class."
                            ),
                            "effects": {"members": 14, "resources": -8, "cohesion": 4},
                            "year_advance": 46,
                            "sound_effect": "crowd",
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "bacaudae-relief-b",
                            "description": (
                                "A magistrate accuses you of aiding rebels. Weeks of inquiry "
                                "exhaust deacons and delay the basilica."
                            ),
                            "effects": {"cohesion": -6, "resources": -6},
                            "year_advance": 44,
                            "sound_effect": "quiet",
                        },
                        "weight": 4,
                    },
                ],
            },
            {
                "id": "bacaudae-shelter",
                "label": "Shelter families quietly without taking a public stance.",
                "reflection": {
                    "prompt": "Why might neutrality be risky?",
                    "options": [
                        "Hidden aid can look like conspiracy to officials.",
                        "Refugees dislike private worship.",
                        "It decreases the basilica's value.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "bacaudae-shelter-a",
                            "description": (
                                "Refugees bless your care and spread word of discreet mercy. "
                                "Local leaders respect your discretion."
                            ),
                            "effects": {"cohesion": 10, "members": 6},
                            "year_advance": 48,
                            "sound_effect": "quiet",
                        },
                        "weight": 8,
                    },
                    {
                        "value": {
                            "id": "bacaudae-shelter-b",
                            "description": (
                                "Soldiers discover the shelter. An investigation freezes your "
                                "accounts until innocence is proven."
                            ),
                            "effects": {"resources": -10, "cohesion": -4},
                            "year_advance": 43,
                            "sound_effect": "crowd",
                        },
                        "weight": 2,
                    },
                ],
            },
        ],
    },
    # ═════════════════════════════════════════════════════════════════════
    # FADING
    # ═════════════════════════════════════════════════════════════════════
    {
        "id": "visigoth-settlement",
        "era": "fading",
        "year_hint": 440,
        "title": "Federates in the Valley",
        "narrative": (
            "Visigothic families settle under treaty on villa lands. They are Christian, "
            "but Arian. The old landowners ask you to keep them at arm's length."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "The River Crossing",
        "scene_caption": "Ox carts and unfamiliar hymns on the road from Tolosa.",
        "choices": [
            {
                "id": "visigoth-welcome",
                "label": "Open the hospice and market to the newcomers.",
                "requirements": {"forbidden_tags": ["imperial_patronage"]},
                "reflection": {
                    "prompt": "What divides the newcomers from your community?",
                    "options": [
                        "Their Arian view of Christ's nature.",
                        "They do not celebrate Easter.",
                        "They refuse to learn Latin.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "visigoth-welcome-a",
                            "description": "Gothic households trade and worship nearby. Some ask for instruction.",
                            "effects": {"members": 24, "cohesion": -4, "influence": 6},
                            "year_advance": 14,
                            "sound_effect": "crowd",
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "visigoth-welcome-b",
                            "description": "Old families withdraw their support, calling you a friend of heretics.",
                            "effects": {"resources": -10, "influence": -8},
                            "year_advance": 16,
                            "sound_effect": "quiet",
                        },
                        "weight": 4,
                    },
                ],
            },
            {
                "id": "visigoth-distance",
                "label": "Keep the old families' trust and stay apart.",
                "reflection": None,
                "outcomes": [
                    {
                        "value": {
                            "id": "visigoth-distance-a",
                            "description": "Roman patrons stay generous. The valley splits along the river.",
                            "effects": {"resources": 8, "cohesion": 4, "members": -4},
                            "year_advance": 12,
                            "sound_effect": "quiet",
                        },
                        "weight": 1,
                    },
                ],
            },
        ],
    },
    {
        "id": "last-magistrate",
        "era": "fading",
        "year_hint": 470,
        "title": "The Last Magistrate",
        "narrative": (
            "The city council has dwindled to three old men. They ask the bishop to take "
            "over the grain dole and the walls."
        ),
        "scene_image": SCENE_IMAGE,
        "scene_title": "The Empty Curia",
        "scene_caption": "Benches built for a hundred, three figures in the lamplight.",
        "choices": [
            {
                "id": "magistrate-accept",
                "label": "Take up the civic burden in the church's name.",
                "reflection": {
                    "prompt": "What does the church gain and lose by governing?",
                    "options": [
                        "Authority, at the cost of worldly entanglement.",
                        "Nothing; the office is ceremonial.",
                        "Imperial funding from Ravenna.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "magistrate-accept-a",
                            "description": "Bread reaches every household. The city now looks to the bishop.",
                            "effects": {"members": 30, "influence": 16, "resources": -12},
                            "year_advance": 12,
                            "sound_effect": "crowd",
                        },
                        "weight": 7,
                    },
                    {
                        "value": {
                            "id": "magistrate-accept-b",
                            "description": "Famine years stretch the stores. Blame falls on the clergy.",
                            "effects": {"cohesion": -10, "resources": -18},
                            "year_advance": 14,
                            "sound_effect": "quiet",
                        },
                        "weight": 3,
                    },
                ],
            },
            {
                "id": "magistrate-decline",
                "label": "Decline. The church keeps to prayer and alms.",
                "reflection": {
                    "prompt": "What risk follows declining?",
                    "options": [
                        "A vacuum that others may fill by force.",
                        "Immediate excommunication.",
                        "Loss of the liturgy.",
                    ],
                    "correct_index": 0,
                },
                "outcomes": [
                    {
                        "value": {
                            "id": "magistrate-decline-a",
                            "description": "A Gothic count takes the walls. Your community is left in peace.",
                            "effects": {"cohesion": 6, "influence": -6},
                            "year_advance": 10,
                            "sound_effect": "chant",
                        },
                        "weight": 6,
                    },
                    {
                        "value": {
                            "id": "magistrate-decline-b",
                            "description": "Disorder spreads. Families leave for safer towns.",
                            "effects": {"members": -20, "cohesion": -4},
                            "year_advance": 12,
                            "sound_effect": "quiet",
                        },
                        "weight": 4,
                    },
                ],
            },
        ],
    },
]

MICRO_EVENTS = [
    # Flavor
    {
        "id": "micro-catechumen-class",
        "kind": "flavor",
        "description": "A new catechumen class fills the courtyard with questions.",
        "effects": {"members": 3},
    },
    {
        "id": "micro-quarrel",
        "kind": "flavor",
        "description": "Two deacons quarrel over the lamp-oil accounts.",
        "effects": {"cohesion": -2},
    },
    {
        "id": "micro-letter",
        "kind": "flavor",
        "description": "A letter from a sister church is read aloud to the assembly.",
        "effects": {"cohesion": 2, "influence": 1},
    },
    {
        "id": "micro-fever",
        "kind": "flavor",
        "description": "A fever passes through the lower town. The deacons visit every house.",
        "effects": {"members": -2, "cohesion": 3},
    },
    {
        "id": "micro-wedding",
        "kind": "flavor",
        "description": "A wedding between two member families draws curious neighbors.",
        "effects": {"members": 2, "influence": 1},
    },
    # Donations
    {
        "id": "micro-bequest",
        "kind": "donation",
        "description": "A widow's bequest arrives with a note: for the poor.",
        "effects": {"resources": 8},
    },
    {
        "id": "micro-harvest-tithe",
        "kind": "donation",
        "description": "Farm families bring the first fruits of a good harvest.",
        "effects": {"resources": 6},
    },
    {
        "id": "micro-merchant-gift",
        "kind": "donation",
        "description": "A grateful merchant sends amphorae of oil for the lamps.",
        "effects": {"resources": 5},
    },
    {
        "id": "micro-artisan-guild",
        "kind": "donation",
        "description": "The potters' guild pledges a share of its market-day earnings.",
        "effects": {"resources": 7},
    },
    # Historical beats
    {
        "id": "micro-decian-edict",
        "kind": "historical",
        "description": "News arrives: the emperor demands sacrifice from every household.",
        "effects": {"cohesion": -3, "influence": -2},
        "year_window": [238, 260],
    },
    {
        "id": "micro-edict-of-milan",
        "kind": "historical",
        "description": "Heralds read the Edict of Milan. Confiscated property is to be returned.",
        "effects": {"resources": 6, "influence": 4},
        "year_window": [313, 330],
    },
    {
        "id": "micro-nicaea",
        "kind": "historical",
        "description": "The bishop returns from Nicaea with a creed to teach.",
        "effects": {"cohesion": 4},
        "year_window": [325, 345],
    },
    {
        "id": "micro-sack-of-rome",
        "kind": "historical",
        "description": "Refugees bring word that Rome itself has been sacked.",
        "effects": {"members": 4, "cohesion": -3},
        "year_window": [410, 430],
    },
]

BASE_DECK_DATA = {
    "initial_year": 112,
    "era_table": ERA_TABLE,
    "events": EVENTS,
    "micro_events": MICRO_EVENTS,
}


def load_base_deck() -> GameDeck:
    """Build the typed base deck from the authored data"""
    return GameDeck.from_dict(BASE_DECK_DATA)
