from .models import MindMapSnapshot, Node, Project
from .snapshot import SnapshotAccessor, StaticSnapshotAccessor, FileSnapshotAccessor, snapshot_from_dict
from .artifacts import Artifact, DeliverySink, DirectorySink, ConsoleSink, MemorySink
from .config import RunConfig
from .progress import ProgressReporter, RichProgressReporter, NoopProgressReporter
