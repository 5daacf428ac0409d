from circulist.circular_cursor import CircularCursor, init
from circulist.cons import ConsList
from circulist.errors import Error, PipelineError, SettingsError
from circulist.pipeline import apply_pipeline
from circulist.settings import CursorSettings, configure, get_settings, load_settings
