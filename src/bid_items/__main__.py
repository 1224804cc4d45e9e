from bid_items.cli import app

app(prog_name="bid-items")
