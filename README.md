# textrpg

A small turn-based role-playing game played in the terminal. The game text
is in Korean.

You name your hero (the name must not be empty and must not contain a
space), then alternate between visiting the shop, checking your status and
fighting randomly chosen monsters (Slime, Orc, Troll, Dragon, Goblin).
Winning a fight earns 50 experience, 10–20 gold and, with a 30% chance, an
item the monster carried. Every 100 experience points raise your level, up
to level 10. From level 10 on, every monster is a boss ("... Lord"), and
beating one clears the game and ends the program. Dying starts a new game
with a new hero.

## Installing

```
pip install .
```

## Playing

```
textrpg
```

On the title screen, move the cursor with `w` / `s` and confirm with the
space bar:

- **GAME START** – begin a new session
- **GAME INFO** – show the team screen; press space to go back
- **QUIT** – leave the game

Inside a session, pick a menu entry by typing its number and pressing Enter:

1. Shop – buy items with gold, or sell one item from your inventory for 60%
   of its price (rounded down)
2. Status – show level, attack, HP, max HP, experience and gold
3. Battle – each turn, attack (`1`) or use an item from your inventory
   (`2`); the monster strikes back after every action
4. Quit – end the program

Entering `9` as a battle action makes the hero die at once, which is handy
for trying out the game-over path.

### Items

| Item          | Price | Shop stock | Effect                                              |
|---------------|-------|------------|-----------------------------------------------------|
| 회복 포션      | 10    | 10         | heal 50 HP (up to max HP)                           |
| 공격력 강화    | 40    | 3          | attack +10                                          |
| 체력 강화      | 30    | 3          | max HP +50                                          |
| 저주 물약      | 50    | 3          | take 5 damage; records a bonus damage that is always 0 and unused in battle |
| 장막           | 70    | 2          | the next hit you take does only 5 damage            |
| 두번 때리기    | 80    | 2          | your next attack deals double damage                |
| 회피 주사위    | 60    | 5          | roll a die on the next hit; a 3 dodges it entirely  |

Using an item asks for a Y/N confirmation. Items you sell go back into the
shop's stock.

Battles, loot, rewards and level-ups are appended with a timestamp to
`GameLog.txt` in the current directory.

## Using it as a library

The pieces can be driven from code. Every function that reads player input
takes a `read` callable, which is called with the prompt text and returns
the answer, so a scripted sequence of answers can stand in for the keyboard:

```python
from textrpg.character import Character
from textrpg.battle import start_battle

answers = iter(["1"] * 100)
hero = Character("Hero", 1, 200, 30, 0, 0)
result = start_battle(hero, lambda prompt: next(answers))
print(result.player_won, result.gold_gained, result.exp_gained)
```

Useful entry points:

- `textrpg.character.Character` – a hero with `stats`
  (`textrpg.stats.CombatStats`) and an `inventory`
  (`textrpg.inventory.Inventory`)
- `textrpg.items` – `Item`, `create_shop_items()`, `create_monster_item()`
- `textrpg.monsters.create_monster(player_level)`
- `textrpg.shop.Shop`
- `textrpg.battle.start_battle(player, read)` returning a `BattleResult`
- `textrpg.session.GameSession(read)` – one play-through; `run()` ends by
  raising `GameExit`
- `textrpg.game.GameManager` and `textrpg.game.main()`

## What it does not do

There is no saving or loading: a game exists only while the program runs,
and the only thing written to disk is the log file.

## Running the tests

```
pip install .[test]
pytest
```