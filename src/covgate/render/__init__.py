from covgate.render.summary import render_delta_table

__all__ = ["render_delta_table"]
