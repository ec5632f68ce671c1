"""
Settings package: `base` holds shared configuration, `dev` / `staging` / `prod`
hold the per-environment overrides. See `config.env` for how one is selected.
"""
