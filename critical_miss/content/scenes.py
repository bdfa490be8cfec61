"""
Authored scenes.

Every scene is pure data: choices carry success/failure outcomes built from
effect records, and attacks are tagged with an explicit combat trigger.
"""

from __future__ import annotations

from critical_miss.models.combat import CombatOutcome
from critical_miss.models.scene import (
    AddCompanion,
    AddItem,
    AdjustGold,
    AdjustHp,
    AdjustRelationship,
    AdvanceArc,
    CombatTrigger,
    Effect,
    ForceScene,
    GainXp,
    JoinParty,
    Outcome,
    Scene,
    SceneChoice,
    SetArcFlag,
)
from critical_miss.models.stats import StatKey

STR, DEX, CON, INT, WIS, CHA = (
    StatKey.STR,
    StatKey.DEX,
    StatKey.CON,
    StatKey.INT,
    StatKey.WIS,
    StatKey.CHA,
)

CHESTY_ID = "comp_chesty"


# =============================================================================
# Builders
# =============================================================================


def _xp(amount: int) -> GainXp:
    return GainXp(amount=amount)


def _gold(amount: int) -> AdjustGold:
    return AdjustGold(amount=amount)


def _hp(amount: int) -> AdjustHp:
    return AdjustHp(amount=amount)


def _arc(delta: int) -> AdvanceArc:
    return AdvanceArc(delta=delta)


def _flag(key: str) -> SetArcFlag:
    return SetArcFlag(key=key)


def _goto(scene_id: str) -> ForceScene:
    return ForceScene(scene_id=scene_id)


def _item(name: str) -> AddItem:
    return AddItem(item=name)


def _out(
    text: str,
    *effects: Effect,
    logs: list[str] | None = None,
    combat: CombatTrigger | None = None,
) -> Outcome:
    return Outcome(text=text, logs=logs or [], effects=list(effects), combat=combat)


def _choice(
    choice_id: str, text: str, stat: StatKey, dc: int, success: Outcome, fail: Outcome
) -> SceneChoice:
    return SceneChoice(
        id=choice_id, text=text, stat=stat, dc=dc, on_success=success, on_fail=fail
    )


def _scene(scene_id: str, category: str, title: str, body: str, *choices: SceneChoice) -> Scene:
    return Scene(id=scene_id, category=category, title=title, body=body, choices=list(choices))


def _fight(enemy_kind: str, label: str, win: str, lose: str, flee: str) -> CombatTrigger:
    return CombatTrigger(
        enemy_kind=enemy_kind,
        on_win=CombatOutcome(text=win, logs=[f"Combat won: {label}"]),
        on_lose=CombatOutcome(text=lose, logs=[f"Combat lost: {label}"]),
        on_flee=CombatOutcome(text=flee, logs=[f"Fled: {label}"]),
    )


# =============================================================================
# Hub
# =============================================================================

_HUB = [
    _scene(
        "tavern.dripping_goblet",
        "Tavern",
        "The Dripping Goblet",
        "The air smells like stew and bad decisions. Someone is eying you suspiciously.",
        _choice(
            "rumors",
            "Ask the barkeep for rumors",
            CHA,
            12,
            _out(
                "The barkeep leans in and shares a rumor about a map that leads to a "
                "lantern-lit vault in the Black Road ruins. +4 XP.",
                _xp(4),
                _flag("heard_rumor"),
                _arc(10),
                logs=["Quest hook: The Map That Shouldn’t Exist"],
            ),
            _out(
                "The barkeep charges you for “information” and gives you a weather "
                "report. -2 gold.",
                _gold(-2),
            ),
        ),
        _choice(
            "suspicious",
            "Approach the suspicious stranger",
            WIS,
            13,
            _out(
                "You defuse the tension with alarming competence. The stranger offers "
                "a lead. +5 XP.",
                _xp(5),
            ),
            _out(
                "You say the wrong thing. The stranger stands. Chairs scrape. Someone "
                "reaches for a bottle.",
                logs=["Combat triggered: Tavern brawl"],
                combat=_fight(
                    "thug",
                    "Tavern brawl",
                    win="The thug collapses and the tavern pretends it didn’t see. "
                    "You keep your pride.",
                    lose="You go down hard. Someone steps on your hand “by accident.”",
                    flee="You slip out into the night with your dignity mostly intact.",
                ),
            ),
        ),
        _choice(
            "flirt",
            "Flirt with the barmaid",
            CHA,
            14,
            _out("It works. You receive a free drink and a dangerous smile. +3 gold.", _gold(3)),
            _out("It does not work. You learn something about rejection. +1 XP.", _xp(1)),
        ),
    ),
]


# =============================================================================
# Arc: treasure
# =============================================================================

_ARC_COMPLETE_TREASURE = ["Arc complete: The Map That Shouldn’t Exist"]

_TREASURE = [
    _scene(
        "tavern.rumor_black_road",
        "Tavern",
        "A Rumor With Teeth",
        "A veteran with road-dust in his beard leans in. “If you’re going to be stupid,” "
        "he says, “be stupid in the Black Road ruins. There’s a lantern room down there "
        "that only opens for liars and the desperate.”",
        _choice(
            "buy_info",
            "Buy him another drink and get details",
            CHA,
            13,
            _out(
                "He sketches a crude route and a warning: “Don’t trust the first light "
                "you see.” -2 gold.",
                _gold(-2),
                _flag("treasure_rumor"),
                _arc(14),
                logs=["Clue gained: route sketch (Black Road)"],
            ),
            _out(
                "He takes your coin and forgets your face mid-sentence. You learn "
                "humility. -2 gold.",
                _gold(-2),
                _arc(10),
            ),
        ),
        _choice(
            "mock",
            "Mock the rumor (quietly)",
            WIS,
            12,
            _out(
                "You keep your skepticism inside your mouth. You leave with your teeth "
                "intact. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "You laugh. He breaks your nose with a mug, very calmly. -1 HP.",
                _hp(-1),
                _arc(10),
            ),
        ),
        _choice(
            "leave",
            "Leave now",
            WIS,
            10,
            _out(
                "You decide to live another day. It feels… unfamiliar. +1 XP.", _xp(1), _arc(8)
            ),
            _out(
                "You try to leave, but your curiosity follows you out the door. +1 XP.",
                _xp(1),
                _arc(8),
            ),
        ),
    ),
    _scene(
        "street.map_drop",
        "Street",
        "The Dropped Map",
        "A man runs past you with panic in his eyes. Something falls from his cloak: a "
        "folded map sealed with black wax. He doesn’t look back.",
        _choice(
            "take",
            "Take the map",
            DEX,
            12,
            _out(
                "Your hands move before your morals can speak. The wax is still warm.",
                _item("Sealed Map (Black Wax)"),
                _flag("map_acquired"),
                _arc(14),
                logs=["Item acquired: Sealed Map (Black Wax)"],
            ),
            _out(
                "You fumble. A boot heel catches your fingers. Pain teaches speed. -1 HP.",
                _hp(-1),
                _arc(10),
            ),
        ),
        _choice(
            "return",
            "Chase him and return it",
            CON,
            14,
            _out(
                "You catch him. He thanks you like a man who expects to be dead soon. +3 XP.",
                _xp(3),
                _arc(12),
                logs=["Clue gained: “Don’t go to the vault.”"],
            ),
            _out(
                "He vanishes into the crowd. You run until your lungs revolt. -2 HP.",
                _hp(-2),
                _arc(10),
            ),
        ),
        _choice(
            "burn",
            "Burn it",
            WIS,
            13,
            _out(
                "You destroy it before it can destroy you. Smart choices feel "
                "disgusting. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "The wax won’t catch. The paper feels… treated. You decide to keep it "
                "anyway. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "road.first_blood",
        "Road",
        "First Blood on the Black Road",
        "The road narrows into pine and shadow. You feel eyes on you. Hungry, patient eyes.",
        _choice(
            "camp",
            "Make camp early",
            WIS,
            12,
            _out(
                "You choose a defensible spot. The night passes without teeth. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "You camp in a hollow like an idiot. Something takes a bite. -2 HP.",
                _hp(-2),
                _arc(10),
                logs=["Combat triggered: Hollow ambush"],
                combat=_fight(
                    "hound",
                    "Hollow ambush",
                    win="The hound limps off into the pines. You sleep with one eye open.",
                    lose="Teeth, dark, then nothing. You wake up missing a boot.",
                    flee="You leave the hollow, and a good blanket, to the hound.",
                ),
            ),
        ),
        _choice(
            "press",
            "Press on through the dark",
            CON,
            13,
            _out("You keep moving. Fear becomes fuel. +3 XP.", _xp(3), _arc(12)),
            _out(
                "You stumble and swear loudly. The forest remembers. -1 HP.",
                _hp(-1),
                _arc(10),
            ),
        ),
        _choice(
            "trail",
            "Follow the tracks you “definitely” see",
            INT,
            14,
            _out(
                "You find a dropped pouch before the tracks vanish. +2 gold.",
                _gold(2),
                _arc(10),
            ),
            _out(
                "You follow nothing for an hour. You learn the shape of embarrassment. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "road.bridge_toll",
        "Road",
        "The Bridge Toll",
        "A narrow bridge spans a cold river. A guard in patchwork armor blocks the way "
        "with a spear and a bored expression.",
        _choice(
            "pay",
            "Pay the toll",
            WIS,
            10,
            _out(
                "You pay. The guard nods like you’ve validated his entire existence. -3 gold.",
                _gold(-3),
                _arc(10),
            ),
            _out("You pay too much. He does not correct you. -5 gold.", _gold(-5), _arc(10)),
        ),
        _choice(
            "talk",
            "Talk your way across",
            CHA,
            14,
            _out(
                "You sell him a story about urgent business and tragic orphans. He waves "
                "you through. +2 XP.",
                _xp(2),
                _arc(12),
            ),
            _out(
                "He calls your bluff and jabs you in the ribs “by accident.” -1 HP.",
                _hp(-1),
                _arc(10),
            ),
        ),
        _choice(
            "ford",
            "Find another way",
            DEX,
            13,
            _out(
                "You find a shallow ford and keep your boots mostly dry. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "You slip into freezing water and crawl out like a drowned rat. -2 HP.",
                _hp(-2),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "road.rival_party",
        "Road",
        "Rival Adventurers",
        "You find another party at the roadside shrine. Better equipped, cleaner, and "
        "smiling too easily. One of them eyes your pack like he already owns it.",
        _choice(
            "trade",
            "Trade information",
            WIS,
            13,
            _out(
                "You trade half-truths and keep your real lead. They leave thinking they "
                "won. +3 XP.",
                _xp(3),
                _arc(12),
            ),
            _out("You talk too much. Their smiles sharpen. +1 XP.", _xp(1), _arc(10)),
        ),
        _choice(
            "threat",
            "Threaten them",
            STR,
            14,
            _out(
                "You make it clear the next step is violence. They decide it’s not worth "
                "the blood. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "They laugh, then someone hits you when you’re not looking. -2 HP.",
                _hp(-2),
                _arc(10),
                logs=["Combat triggered: Shrine scuffle"],
                combat=_fight(
                    "rival",
                    "Shrine scuffle",
                    win="Their best fighter yields. The rest suddenly remember urgent "
                    "business elsewhere.",
                    lose="You wake up at the shrine, lighter by one pack and one ego.",
                    flee="You sprint down the road. Their laughter follows for a while.",
                ),
            ),
        ),
        _choice(
            "leave",
            "Leave quietly",
            DEX,
            12,
            _out("You disappear before pride can ruin you. +2 XP.", _xp(2), _arc(10)),
            _out(
                "You leave… and notice later that two coins are missing. -2 gold.",
                _gold(-2),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "ruins.stone_gate",
        "Ruins",
        "The Stone Gate",
        "The ruins breathe cold air. A stone gate blocks the descent, carved with "
        "warnings that have been scraped away and rewritten. Someone has been here recently.",
        _choice(
            "study",
            "Study the carvings",
            INT,
            14,
            _out(
                "You decipher the pattern: the gate responds to lies spoken with "
                "conviction. +3 XP.",
                _xp(3),
                _arc(12),
            ),
            _out(
                "You learn only that someone hated this place enough to vandalize it "
                "twice. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
        _choice(
            "force",
            "Force it",
            STR,
            15,
            _out(
                "It opens with a scream of stone. You bruise your shoulder, but you’re "
                "in. -1 HP, +2 XP.",
                _hp(-1),
                _xp(2),
                _arc(12),
            ),
            _out(
                "The gate does not move. Something does. You get hit by falling "
                "masonry. -3 HP.",
                _hp(-3),
                _arc(10),
            ),
        ),
        _choice(
            "lie",
            "Lie to the gate with confidence",
            CHA,
            13,
            _out(
                "You tell a lie so clean it almost becomes truth. The gate opens. +3 XP.",
                _xp(3),
                _arc(14),
            ),
            _out(
                "The gate rejects your lie and punishes your honesty. A stone shard "
                "slices your palm. -2 HP.",
                _hp(-2),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "vault.lantern_room",
        "Vault",
        "The Lantern Room",
        "A chamber lined with dead lanterns. One burns with a steady flame though no one "
        "has lit it. In its light, you see scratches on the floor. A fight happened here.",
        _choice(
            "take",
            "Take the lantern",
            DEX,
            14,
            _out(
                "The lantern is warm in your hand. The shadows hate it.",
                _item("Lantern of True Flame"),
                _arc(16),
                logs=["Item acquired: Lantern of True Flame"],
            ),
            _out(
                "The flame flares and bites. Your fingers blister. -2 HP.",
                _hp(-2),
                _arc(12),
            ),
        ),
        _choice(
            "inspect",
            "Inspect the scratches",
            WIS,
            13,
            _out(
                "You read the fight like a story: someone came for the lock. Someone left "
                "bleeding. +3 XP.",
                _xp(3),
                _arc(12),
            ),
            _out(
                "You learn nothing except that fear has handwriting. +1 XP.", _xp(1), _arc(10)
            ),
        ),
        _choice(
            "wait",
            "Wait in the dark",
            CON,
            12,
            _out("You wait. Nothing comes. That feels wrong. +2 XP.", _xp(2), _arc(10)),
            _out(
                "You drift and startle awake. Something small scurries away. -1 HP (panic).",
                _hp(-1),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "vault.final_lock",
        "Vault",
        "The Final Lock",
        "The vault door is sealed by a lock with three tumblers: bone, iron, and glass. "
        "You can hear water behind it, like a river trapped in a throat.",
        _choice(
            "pick",
            "Pick the lock",
            DEX,
            15,
            _out(
                "The tumblers click like prayers. The door opens. Inside: treasure and "
                "silence. +25 gold, +8 XP.",
                _gold(25),
                _xp(8),
                _arc(20),
                logs=_ARC_COMPLETE_TREASURE,
            ),
            _out(
                "The lock bites back. A thin glass needle pierces your thumb. -3 HP.",
                _hp(-3),
                _arc(16),
            ),
        ),
        _choice(
            "smash",
            "Smash it open",
            STR,
            16,
            _out(
                "You break the door, and it breaks you a little back. Treasure spills out "
                "like guilt. -2 HP, +18 gold, +6 XP.",
                _hp(-2),
                _gold(18),
                _xp(6),
                _arc(18),
                logs=_ARC_COMPLETE_TREASURE,
            ),
            _out("Stone wins. You lose. -4 HP.", _hp(-4), _arc(14)),
        ),
        _choice(
            "leave",
            "Walk away",
            WIS,
            14,
            _out(
                "You leave the treasure behind. You keep your life. That is a trade most "
                "people never learn. +5 XP.",
                _xp(5),
                _arc(18),
                logs=_ARC_COMPLETE_TREASURE,
            ),
            _out(
                "You try to leave. The map in your pocket feels heavier with every step. "
                "You turn back. +2 XP.",
                _xp(2),
                _arc(14),
            ),
        ),
    ),
]


# =============================================================================
# Arc: vengeance
# =============================================================================

_ARC_COMPLETE_VENGEANCE = ["Arc complete: Black Letter"]

_VENGEANCE = [
    _scene(
        "letter.black_seal",
        "Letter",
        "A Black Seal",
        "A courier finds you by name. He won’t meet your eyes. The letter is sealed in "
        "black wax. Your sister’s name is written in the corner in a hand you don’t recognize.",
        _choice(
            "open",
            "Open it",
            CON,
            12,
            _out(
                "The words cut clean: she’s dead. A place is named. A man is blamed. Your "
                "grief becomes direction. +2 XP.",
                _xp(2),
                _flag("sister_dead"),
                _arc(14),
                logs=["Quest hook: Vengeance"],
            ),
            _out(
                "Your hands shake. You smear ink like blood. The message remains. -1 HP (shock).",
                _hp(-1),
                _flag("sister_dead"),
                _arc(12),
            ),
        ),
        _choice(
            "ask",
            "Question the courier",
            WIS,
            13,
            _out(
                "He admits the sender paid extra to rush it, and paid extra to stay "
                "anonymous. +3 XP.",
                _xp(3),
                _arc(12),
                logs=["Clue gained: sender anonymous (paid extra)"],
            ),
            _out(
                "He says only, “I just deliver.” His fear answers more than his words. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
        _choice(
            "burn",
            "Burn the letter",
            WIS,
            14,
            _out(
                "You burn it and swear you don’t need paper to remember. The ashes don’t "
                "help. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "It won’t catch. The wax blackens and refuses. You take it as a sign. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "village.funeral",
        "Village",
        "The Funeral",
        "They’ve buried her, but the earth still looks raw. People speak softly around "
        "you like you might break. Someone watches from the edge of the crowd and leaves "
        "when you look back.",
        _choice(
            "ask",
            "Ask who left",
            CHA,
            13,
            _out(
                "A widow says he was a hired man, not local. “He didn’t cry.” +3 XP.",
                _xp(3),
                _arc(12),
                logs=["Clue gained: hired man at funeral"],
            ),
            _out(
                "No one wants to talk. Fear has swallowed the village. +1 XP.", _xp(1), _arc(10)
            ),
        ),
        _choice(
            "kneel",
            "Kneel at the grave",
            WIS,
            12,
            _out(
                "You promise vengeance out loud. The wind answers like it heard you. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "You can’t find words. The silence becomes your oath. +1 XP.", _xp(1), _arc(10)
            ),
        ),
        _choice(
            "leave",
            "Leave before you fall apart",
            CON,
            12,
            _out("You walk away with your spine intact. +2 XP.", _xp(2), _arc(10)),
            _out(
                "Your legs nearly give out. You catch yourself on the headstone. -1 HP.",
                _hp(-1),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "road.witness",
        "Road",
        "A Witness With Loose Teeth",
        "You find a man in a roadside ditch with a split lip and a ruined coat. He "
        "flinches when you say your sister’s name.",
        _choice(
            "help",
            "Help him up",
            WIS,
            12,
            _out(
                "He tells you the name of the man who hired the killers, and where to "
                "find him. +3 XP.",
                _xp(3),
                _arc(12),
                logs=["Clue gained: “House Merrow”"],
            ),
            _out(
                "He’s too scared to say much. But fear points in a direction. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
        _choice(
            "threaten",
            "Threaten him",
            STR,
            13,
            _out(
                "He talks fast. He talks ugly. He talks true. +2 XP.",
                _xp(2),
                _arc(10),
                logs=["Clue gained: manor on the hill"],
            ),
            _out(
                "He panics and swings a rock. It clips your jaw. -1 HP.",
                _hp(-1),
                _arc(10),
                logs=["Combat triggered: Ditch scrap"],
                combat=_fight(
                    "thug",
                    "Ditch scrap",
                    win="He drops the rock and mumbles a name: Merrow. You let him crawl off.",
                    lose="He takes your purse and your dignity and runs for the trees.",
                    flee="You back away from a man with nothing left to lose.",
                ),
            ),
        ),
        _choice(
            "leave",
            "Leave him",
            WIS,
            14,
            _out(
                "You decide you don’t need him. You’re probably wrong. +1 XP.", _xp(1), _arc(10)
            ),
            _out(
                "Your conscience follows you for a mile before it shuts up. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "road.hired_blade",
        "Road",
        "Hired Blade",
        "A rider blocks the road, cloak hiding his hands. “Turn around,” he says. “This "
        "isn’t your fight.” His tone says it absolutely is.",
        _choice(
            "talk",
            "Talk him down",
            CHA,
            14,
            _out(
                "He hesitates. For a moment you see the man under the job. He lets you "
                "pass. +4 XP.",
                _xp(4),
                _arc(14),
            ),
            _out(
                "He doesn’t hesitate. Something sharp kisses your ribs. -2 HP.",
                _hp(-2),
                _arc(12),
            ),
        ),
        _choice(
            "fight",
            "Draw steel",
            STR,
            15,
            _out(
                "You win the exchange and take his coin purse. He rides away bleeding "
                "pride. +3 gold, +4 XP.",
                _xp(4),
                _gold(3),
                _item("Bloodstained Signet (Merrow)"),
                _arc(14),
                logs=["Item acquired: Bloodstained Signet (Merrow)"],
            ),
            _out(
                "He’s better than you hoped. You stagger back, alive by luck. -4 HP.",
                _hp(-4),
                _arc(12),
                logs=["Combat triggered: Hired blade"],
                combat=_fight(
                    "rival",
                    "Hired blade",
                    win="The rider falls from the saddle and does not get up. His signet "
                    "bears a crest: Merrow.",
                    lose="He leaves you in the road, alive on purpose. That is the message.",
                    flee="You crash into the brush. Hooves circle, then fade.",
                ),
            ),
        ),
        _choice(
            "sneak",
            "Slip past through the brush",
            DEX,
            13,
            _out(
                "You vanish off-road and reappear behind him. He swears. You keep "
                "walking. +3 XP.",
                _xp(3),
                _arc(12),
            ),
            _out(
                "Thorns grab you like hands. He hears you, and you get hit for your "
                "trouble. -2 HP.",
                _hp(-2),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "manor.closed_doors",
        "Manor",
        "Closed Doors",
        "The manor looms above the village like a judgment. The doors are shut. The "
        "windows are lit. Somewhere inside, someone is comfortable.",
        _choice(
            "front",
            "Knock at the front door",
            CHA,
            13,
            _out(
                "A servant answers and lies badly. You step inside before he can close "
                "the door. +3 XP.",
                _xp(3),
                _arc(12),
            ),
            _out(
                "The servant says “no” like he’s practiced it. You get nothing but a "
                "closed door. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
        _choice(
            "climb",
            "Climb to a window",
            DEX,
            14,
            _out(
                "You slip inside like a secret. The house smells of wax and money. +3 XP.",
                _xp(3),
                _arc(12),
            ),
            _out(
                "A gutter gives. You fall hard. The manor remains unimpressed. -2 HP.",
                _hp(-2),
                _arc(10),
            ),
        ),
        _choice(
            "bribe",
            "Bribe a guard",
            WIS,
            13,
            _out(
                "He takes your gold and looks the other way. -4 gold, +2 XP.",
                _gold(-4),
                _xp(2),
                _arc(12),
            ),
            _out(
                "He takes your gold and calls you “brave.” Then he calls for help. -4 gold.",
                _gold(-4),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "manor.confrontation",
        "Manor",
        "The Confrontation",
        "You find him in a warm room with cold eyes. He’s older than you expected. He "
        "recognizes your face and doesn’t bother to hide it.",
        _choice(
            "kill",
            "Kill him",
            STR,
            15,
            _out(
                "Steel ends the conversation. It does not end the feeling. +10 gold, +8 XP.",
                _xp(8),
                _gold(10),
                _arc(20),
                logs=_ARC_COMPLETE_VENGEANCE,
            ),
            _out(
                "He’s guarded. You get hurt and learn the shape of failure. -5 HP.",
                _hp(-5),
                _arc(14),
            ),
        ),
        _choice(
            "confess",
            "Make him confess",
            CHA,
            16,
            _out(
                "You corner him with words sharper than knives. He admits it. Out loud. "
                "In front of witnesses. +8 XP.",
                _xp(8),
                _arc(20),
                logs=_ARC_COMPLETE_VENGEANCE,
            ),
            _out(
                "He laughs. He has practiced being untouchable. You leave with your rage "
                "intact. +2 XP.",
                _xp(2),
                _arc(12),
            ),
        ),
        _choice(
            "burn",
            "Burn the manor",
            INT,
            15,
            _out(
                "Fire does what law won’t. You walk away while the world screams behind "
                "you. +5 gold, +6 XP.",
                _xp(6),
                _gold(5),
                _arc(18),
                logs=_ARC_COMPLETE_VENGEANCE,
            ),
            _out(
                "The fire turns on you. Smoke fills your lungs. You escape barely. -3 HP.",
                _hp(-3),
                _arc(12),
            ),
        ),
    ),
    _scene(
        "manor.aftermath",
        "Aftermath",
        "Aftermath",
        "Morning arrives like nothing happened. The village is quieter. Your hands are "
        "still the same hands.",
        _choice(
            "stay",
            "Stay and face what you’ve done",
            WIS,
            13,
            _out(
                "You stay. You answer questions. You learn that vengeance doesn’t finish "
                "anything. +4 XP.",
                _xp(4),
                _arc(12),
            ),
            _out(
                "You try to stay, but your body refuses. You leave before dawn. +2 XP.",
                _xp(2),
                _arc(10),
            ),
        ),
        _choice(
            "leave",
            "Leave",
            CON,
            10,
            _out(
                "You leave. The road takes your tears and gives you distance. +2 XP.",
                _xp(2),
                _arc(10),
            ),
            _out(
                "You leave anyway. Some choices don’t require success. +1 XP.", _xp(1), _arc(10)
            ),
        ),
        _choice(
            "pray",
            "Pray",
            WIS,
            14,
            _out(
                "You pray for her. You don’t know who’s listening. You feel a fraction "
                "lighter. +3 XP.",
                _xp(3),
                _arc(10),
            ),
            _out(
                "You try to pray. The words don’t come. The silence is honest. +1 XP.",
                _xp(1),
                _arc(10),
            ),
        ),
    ),
]


# =============================================================================
# Arc: taxman
# =============================================================================

_TAXMAN = [
    _scene(
        "tavern.taxman",
        "Tavern",
        "A Man With A Ledger",
        "A well-dressed stranger slides onto the bench like he’s been waiting for your "
        "financial mistakes. He introduces himself as a “volunteer auditor” for the Crown.",
        _choice(
            "confess",
            "Confess everything",
            WIS,
            12,
            _out(
                "You confess only plausible crimes. He nods like a man enjoying a list. +3 XP.",
                _xp(3),
                _flag("taxman_met"),
                _arc(12),
                _goto("street.paperwork"),
            ),
            _out(
                "You accidentally invent a felony mid-sentence. He writes it down. "
                "-2 gold, +1 XP.",
                _gold(-2),
                _xp(1),
                _flag("taxman_met"),
                _arc(10),
                _goto("street.paperwork"),
            ),
        ),
        _choice(
            "bribe",
            "Bribe him with sincerity",
            CHA,
            14,
            _out(
                "He takes your coin and your handshake. You are now “friends,” which is "
                "somehow worse. -3 gold.",
                _gold(-3),
                _flag("taxman_bribed"),
                _arc(14),
                _goto("street.paperwork"),
            ),
            _out(
                "He takes your coin as “evidence.” You feel sponsored by anxiety. -5 gold.",
                _gold(-5),
                _flag("taxman_bribed"),
                _arc(12),
                _goto("street.paperwork"),
            ),
        ),
        _choice(
            "between",
            "Explain you’re “between incomes”",
            CHA,
            13,
            _out(
                "You spin a tragic backstory involving a cursed wallet. His eyes "
                "glisten. +2 XP.",
                _xp(2),
                _flag("taxman_met"),
                _arc(11),
                _goto("street.paperwork"),
            ),
            _out(
                "He asks for references. You cite a barstool. It does not help. +1 XP.",
                _xp(1),
                _flag("taxman_met"),
                _arc(9),
                _goto("street.paperwork"),
            ),
        ),
    ),
    _scene(
        "street.paperwork",
        "Street",
        "Forms: The True Dungeon",
        "Paperwork thick enough to stop an arrow is placed in your hands. The auditor "
        "watches you like a hawk watching a mouse learn cursive.",
        _choice(
            "forge",
            "Forge it",
            DEX,
            15,
            _out(
                "Your handwriting becomes a weapon. The forms look… legally alive. "
                "+6 gold, +3 XP.",
                _gold(6),
                _xp(3),
                _arc(14),
                _goto("court.day"),
            ),
            _out(
                "You spell your own name wrong. The paper judges you. -4 gold.",
                _gold(-4),
                _arc(10),
                _goto("court.day"),
            ),
        ),
        _choice(
            "read",
            "Actually read it",
            INT,
            14,
            _out(
                "You find a loophole: “Adventuring expenses” are deductible. Your soul "
                "relaxes. +4 gold, +2 XP.",
                _gold(4),
                _xp(2),
                _arc(12),
                _goto("court.day"),
            ),
            _out(
                "The words swim. One paragraph bites you. -1 HP.",
                _hp(-1),
                _arc(9),
                _goto("court.day"),
            ),
        ),
        _choice(
            "eat",
            "Eat the paper",
            CON,
            13,
            _out(
                "You finish the stack. The auditor is horrified. You are technically "
                "“done.” +3 XP.",
                _xp(3),
                _goto("court.day"),
            ),
            _out(
                "You gag on bureaucracy. The ink tastes like regret. -2 HP.",
                _hp(-2),
                _goto("court.day"),
            ),
        ),
    ),
    _scene(
        "court.day",
        "Court",
        "The Crown vs. Your Vibes",
        "The judge looks like a disappointed statue. The prosecutor looks like he "
        "moisturizes with grudges.",
        _choice(
            "represent",
            "Represent yourself",
            CHA,
            15,
            _out(
                "You give a speech about destiny, freedom, and how taxes are basically a "
                "curse. The courtroom claps reluctantly. +3 gold, +4 XP.",
                _xp(4),
                _gold(3),
            ),
            _out(
                "You object to yourself. The judge allows it. You lose on principle. -6 gold.",
                _gold(-6),
            ),
        ),
        _choice(
            "witness",
            "Call the auditor as a character witness",
            WIS,
            14,
            _out(
                "The auditor calls you “a mess, but an honest mess.” Case dismissed on "
                "vibes. +2 gold, +2 XP.",
                _gold(2),
                _xp(2),
            ),
            _out(
                "He testifies you offered him “sincerity.” The courtroom gasps. -8 gold.",
                _gold(-8),
            ),
        ),
        _choice(
            "oops",
            "Plead “Oops.”",
            CHA,
            12,
            _out(
                "The judge respects humility. You get community service: dungeon "
                "latrines. You feel spiritually cleaner. +2 XP.",
                _xp(2),
            ),
            _out(
                "The prosecutor respects nothing. The fine respects you even less. "
                "-4 gold, -1 HP.",
                _hp(-1),
                _gold(-4),
            ),
        ),
    ),
]


# =============================================================================
# Arc: mimic
# =============================================================================

_CHESTY_JOINS = ["New companion acquired: Chesty", "Relationship unlocked: Chesty"]

_MIMIC = [
    _scene(
        "dungeon.mimic_intro",
        "Dungeon",
        "Chest With Feelings",
        "A treasure chest sits alone in the corridor. It sighs. You hate that it sighs.",
        _choice(
            "open",
            "Open it normally",
            DEX,
            13,
            _out(
                "You open it before it commits. Inside: coins and a tiny apology letter. "
                "+6 gold, +2 XP.",
                _gold(6),
                _xp(2),
                _flag("mimic_met"),
                _arc(12),
                _goto("camp.mimic_followup"),
            ),
            _out(
                "It kisses your hand with teeth. You learn boundaries. -3 HP.",
                _hp(-3),
                _flag("mimic_met"),
                _arc(10),
                _goto("camp.mimic_followup"),
            ),
        ),
        _choice(
            "compliment",
            "Compliment it",
            CHA,
            14,
            _out(
                "The chest blushes (somehow) and offers you a “gift.” +4 gold.",
                _gold(4),
                _flag("mimic_met"),
                _goto("camp.mimic_followup"),
            ),
            _out(
                "You compliment the hinges. It is a sensitive topic. -1 HP (emotional).",
                _hp(-1),
                _flag("mimic_met"),
                _goto("camp.mimic_followup"),
            ),
        ),
        _choice(
            "hit",
            "Hit it first",
            STR,
            12,
            _out(
                "It yelps and retreats, leaving loot out of pure fear. +3 gold.",
                _gold(3),
                _flag("mimic_met"),
                _goto("camp.mimic_followup"),
            ),
            _out(
                "You punch a wall. The chest watches. Your dignity dies quietly. -1 HP.",
                _hp(-1),
                _flag("mimic_met"),
                _goto("camp.mimic_followup"),
            ),
        ),
    ),
    _scene(
        "camp.mimic_followup",
        "Camp",
        "The Chest Returns",
        "That night, you hear scraping outside your tent. A small chest sits there like a "
        "stray cat with a violent hobby.",
        _choice(
            "adopt",
            "Adopt it",
            WIS,
            13,
            _out(
                "You gain a weird companion: “Chesty.” You regret nothing. (Yet.) +3 XP.",
                _xp(3),
                _flag("mimic_adopted"),
                _flag("mimic_followup_done"),
                AddCompanion(companion_id=CHESTY_ID, name="Chesty", relationship=50),
                _arc(14),
                logs=["New companion acquired: Chesty"],
            ),
            _out(
                "It adopts you. You wake up briefly inside it. -2 HP, +2 XP.",
                _hp(-2),
                _xp(2),
                _flag("mimic_adopted"),
                _flag("mimic_followup_done"),
                AddCompanion(companion_id=CHESTY_ID, name="Chesty", relationship=40),
                _arc(12),
                logs=["New companion acquired: Chesty"],
            ),
        ),
        _choice(
            "boundaries",
            "Set boundaries",
            CHA,
            12,
            _out(
                "It agrees to bite only enemies and people who deserve it. You feel "
                "oddly proud. +2 XP.",
                _xp(2),
                _flag("mimic_boundaries"),
                _flag("mimic_followup_done"),
                AdjustRelationship(companion_id=CHESTY_ID, delta=5),
                _arc(12),
            ),
            _out(
                "It agrees loudly, then bites your boot to test the rules. -1 HP.",
                _hp(-1),
                _flag("mimic_boundaries"),
                _flag("mimic_followup_done"),
                AdjustRelationship(companion_id=CHESTY_ID, delta=-5),
                _arc(10),
            ),
        ),
        _choice(
            "send",
            "Send it away",
            CHA,
            14,
            _out(
                "It leaves you a single coin as closure. You feel… free? +1 gold.",
                _gold(1),
                _flag("mimic_sent_away"),
                _flag("mimic_followup_done"),
                _arc(12),
            ),
            _out(
                "It leaves anyway, but steals your socks. You are poorer in spirit. -1 gold.",
                _gold(-1),
                _flag("mimic_sent_away"),
                _flag("mimic_followup_done"),
                _arc(10),
            ),
        ),
    ),
    _scene(
        "camp.mimic_finale",
        "Camp",
        "Chesty’s Ultimatum",
        "At midnight, the chest opens itself politely. Inside is a tiny velvet collar… "
        "and a contract written in drool. Chesty wants a role in the party. You suspect "
        "this ends with a bite either way.",
        _choice(
            "party",
            "Make it official: Chesty joins the party",
            CHA,
            14,
            _out(
                "You give a stirring speech about found family and acceptable biting. "
                "Chesty clicks happily. You have a new party member. +6 XP.",
                _xp(6),
                AddCompanion(companion_id=CHESTY_ID, name="Chesty", relationship=65),
                JoinParty(member="Chesty"),
                _flag("mimic_party"),
                _arc(20),
                logs=_CHESTY_JOINS,
            ),
            _out(
                "Your speech is bad. Chesty joins anyway. It bites your hand like a "
                "signature. -2 HP, +4 XP.",
                _hp(-2),
                _xp(4),
                AddCompanion(companion_id=CHESTY_ID, name="Chesty", relationship=55),
                JoinParty(member="Chesty"),
                _flag("mimic_party"),
                _arc(16),
                logs=_CHESTY_JOINS,
            ),
        ),
        _choice(
            "banish",
            "Banish it (gently, with snacks)",
            WIS,
            13,
            _out(
                "You set boundaries so firm they briefly become law. Chesty leaves you "
                "three coins as closure. You feel victorious and slightly lonely. "
                "+3 gold, +3 XP.",
                _gold(3),
                _xp(3),
                _flag("mimic_banished"),
                _arc(18),
            ),
            _out(
                "Chesty refuses, steals two coins, and disappears into the night like a "
                "tiny wooden menace. -2 gold.",
                _gold(-2),
                _flag("mimic_banished"),
                _arc(14),
            ),
        ),
        _choice(
            "weaponize",
            "Weaponize it (morally questionable, strategically correct)",
            INT,
            15,
            _out(
                "You invent “consensual ambush tactics.” Chesty purrs like a trap. You "
                "gain a reputation and some loot. +2 gold, +5 XP.",
                _xp(5),
                _gold(2),
                _flag("mimic_weapon"),
                _arc(18),
            ),
            _out(
                "Chesty weaponizes you. You wake up inside it for three minutes and come "
                "out humbled. -3 HP.",
                _hp(-3),
                _flag("mimic_weapon"),
                _arc(14),
            ),
        ),
    ),
]


# =============================================================================
# Arc: internship
# =============================================================================

_INTERNSHIP = [
    _scene(
        "tower.internship",
        "Magic",
        "Unpaid, Unholy Internship",
        "A wizard offers you an internship. The pay is “experience” and a vague threat.",
        _choice(
            "accept",
            "Accept",
            WIS,
            12,
            _out(
                "You accept and immediately regret it professionally. +2 XP.",
                _xp(2),
                _flag("internship_signed"),
                _arc(12),
                _goto("lab.safety"),
            ),
            _out(
                "You sign a contract written in smoke. You cough once. +1 XP.",
                _xp(1),
                _flag("internship_signed"),
                _arc(10),
                _goto("lab.safety"),
            ),
        ),
        _choice(
            "negotiate",
            "Negotiate pay",
            CHA,
            14,
            _out(
                "You get a stipend and a helmet. The helmet is emotional support. +2 gold.",
                _gold(2),
                _flag("internship_paid"),
                _arc(14),
                _goto("lab.safety"),
            ),
            _out(
                "He laughs in several languages. You buy lunch anyway. -1 gold.",
                _gold(-1),
                _flag("internship_signed"),
                _arc(9),
                _goto("lab.safety"),
            ),
        ),
        _choice(
            "steal",
            "Steal his spellbook",
            DEX,
            16,
            _out(
                "You steal it and immediately don’t understand it. Knowledge is "
                "humiliating. +4 XP.",
                _xp(4),
                _goto("lab.safety"),
            ),
            _out(
                "The spellbook “accidentally” whacks you. The wizard smiles. -2 HP.",
                _hp(-2),
                _goto("lab.safety"),
            ),
        ),
    ),
    _scene(
        "lab.safety",
        "Magic",
        "Safety Third",
        "The lab has three rules: don’t touch the glowing jar, don’t name it, don’t feed "
        "it. You already want to break all three.",
        _choice(
            "follow",
            "Follow the rules",
            INT,
            13,
            _out("You keep all your fingers. Rare achievement. +2 XP.", _xp(2), _goto("fallout.jar")),
            _out(
                "You misread “don’t name” as “do name.” It is now Gary. +1 XP.",
                _xp(1),
                _goto("fallout.jar"),
            ),
        ),
        _choice(
            "ask",
            "Ask what’s in the jar",
            WIS,
            12,
            _out(
                "“Minor demon,” says the wizard. “Major attitude,” says the jar. +1 XP.",
                _xp(1),
                _goto("fallout.jar"),
            ),
            _out(
                "The wizard says “liability” and walks away. The jar laughs. +1 XP.",
                _xp(1),
                _goto("fallout.jar"),
            ),
        ),
        _choice(
            "feed",
            "Feed the jar",
            CON,
            14,
            _out("It purrs. You are disturbed but alive. +2 XP.", _xp(2), _goto("fallout.jar")),
            _out(
                "It bites through the jar. Something escapes with purpose. -3 HP.",
                _hp(-3),
                _goto("fallout.jar"),
            ),
        ),
    ),
    _scene(
        "fallout.jar",
        "Disaster",
        "Gary Wants Freedom",
        "Something escapes. The wizard blames you with the ease of a man who has never "
        "been wrong.",
        _choice(
            "sack",
            "Catch it with a sack",
            DEX,
            14,
            _out(
                "You bag Gary. Gary is offended. The wizard is pleased. +1 gold, +3 XP.",
                _xp(3),
                _gold(1),
            ),
            _out("You bag yourself. The wizard writes notes. -2 HP.", _hp(-2)),
        ),
        _choice(
            "blame",
            "Blame the wizard first",
            CHA,
            15,
            _out(
                "The wizard is briefly speechless. You use the moment to leave. +3 XP.", _xp(3)
            ),
            _out(
                "He writes your name in a book titled “Later.” You feel a future "
                "headache. -1 HP.",
                _hp(-1),
            ),
        ),
        _choice(
            "deal",
            "Make a deal with Gary",
            CHA,
            13,
            _out(
                "Gary agrees to haunt your enemies instead. You feel supported in a toxic "
                "way. +2 XP.",
                _xp(2),
            ),
            _out("Gary agrees to haunt you, specifically. You feel noticed. -1 HP.", _hp(-1)),
        ),
    ),
]


AUTHORED_SCENES: tuple[Scene, ...] = (
    *_HUB,
    *_TREASURE,
    *_VENGEANCE,
    *_TAXMAN,
    *_MIMIC,
    *_INTERNSHIP,
)
