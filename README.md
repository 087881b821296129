# blockrows

Row types and helpers for storing indexed blockchain data in a PostgreSQL
database: accounts, balances, supply, consensus, governance, staking,
slashing, distribution and price feed tables.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What it provides

- `blockrows.coins`: `Coin` (integer amount) and `DecCoin` (`Decimal`
  amount), both checking their denomination and refusing negative amounts,
  and their database forms `DbCoin`, `DbCoins`, `DbDecCoin` and
  `DbDecCoins`.
  - `DbCoin.value()` / `DbDecCoin.value()` give the composite literal
    `(denom,amount)`.
  - `scan(src)` on each class parses the text (as `bytes` or `str`) that a
    driver returns for a single composite or an array of composites.
  - `from_coin`, `from_coins`, `from_dec_coin`, `from_dec_coins` build the
    database forms; `to_coin`, `to_coins`, `to_dec_coin`, `to_dec_coins`
    convert back, raising `ValueError` on malformed amounts. Decimal amounts
    are written with 18 decimal places.
  - `to_string`, `to_null_string` and `remove_empty` handle nullable text
    columns and empty strings.
- Row classes for each table. Each is a frozen dataclass that compares
  equal to another row holding the same data (fields such as `one_row_id`,
  generated ids, proposal content and avatar URLs are left out of the
  comparison where the table treats them that way):
  - `blockrows.accounts`: `AccountRow`, `AccountBalanceRow`, `SupplyRow`
  - `blockrows.consensus`: `GenesisRow`, `ConsensusRow`, `AverageTimeRow`, `BlockRow`
  - `blockrows.mint`: `InflationRow`, `MintParamsRow`
  - `blockrows.staking_pool`: `StakingPoolRow`, `StakingParamsRow`
  - `blockrows.distribution`: `DistributionParamsRow`, `CommunityPoolRow`,
    `ValidatorCommissionAmountRow`, `DelegationRewardRow`
  - `blockrows.gov`: `GovParamsRow`, `ProposalRow`, `TallyResultRow`,
    `VoteRow`, `DepositRow`, `ProposalStakingPoolSnapshotRow`,
    `ProposalValidatorVotingPowerSnapshotRow`
  - `blockrows.pricefeed`: `TokenUnitRow`, `TokenRow`, `TokenPriceRow`
  - `blockrows.slashing`: `ValidatorSigningInfoRow`, `SlashingParamsRow`
  - `blockrows.delegations`: `DelegationRow`, `UnbondingDelegationRow`, `RedelegationRow`
  - `blockrows.validators`: `ValidatorData` (with `parsed_max_rate()` and
    `parsed_max_change_rate()`, which read whole-number rates as `Decimal`),
    `ValidatorRow`, `ValidatorInfoRow`, `ValidatorDescriptionRow` and
    `ValidatorCommissionRow` (each with a `create(...)` that stores blank
    text as `None`), `ValidatorCommissionHistoryRow`,
    `ValidatorVotingPowerRow`, `ValidatorStatusRow`, `DoubleSignVoteRow`,
    `DoubleSignEvidenceRow`
- `blockrows.splitting.split_by_params(items, params_number)`: cuts a
  sequence into batches small enough to stay within PostgreSQL's limit of
  65535 parameters per statement, given the number of parameters each item
  uses.
- `blockrows.modules`: `ModuleRow`, `new_module_rows(names)` and
  `insert_enable_modules(connection, modules)`, which, given a DB-API
  connection using `?` placeholders, deletes the rows of the `modules`
  table, inserts the given names and commits. Nothing happens for an empty
  list; database failures are raised as `RuntimeError`.
- `blockrows.distribution_config`: `DistributionConfig`, `default_config()`
  (a rewards frequency of 100), `parse_config(data)` for reading the
  `distribution` section of a YAML document (returning `None` when there is
  none), and `check_config(cfg)`, which raises `ConfigError` when the
  configuration is missing.

## Example

```python
from blockrows.coins import DbCoins
from blockrows.accounts import AccountBalanceRow
from blockrows.splitting import split_by_params

coins = DbCoins.scan(b'{"(uatom,100)","(stake,5)"}')
row = AccountBalanceRow("cosmos1example", coins, 10)

for batch in split_by_params(list(range(100_000)), 3):
    ...  # build one INSERT per batch
```

Reading a distribution configuration:

```python
from blockrows.distribution_config import parse_config, check_config

cfg = parse_config(b"distribution:\n  rewards_frequency: 50\n")
check_config(cfg)
print(cfg.rewards_frequency)  # 50
```

## What it does not do

The package describes rows and encodes their values; it does not create the
database schema, open database connections, query a chain node or run an
indexer. Apart from `insert_enable_modules`, storing and reading rows is
left to the caller's own database code.