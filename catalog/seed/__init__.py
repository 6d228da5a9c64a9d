from catalog.seed.load_fixtures import read_fixtures, load_into_sql, load_into_mongo, seed_backend
