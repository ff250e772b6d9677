from koch.view.camera import PanDirection as PanDirection
from koch.view.camera import ProjectedSegment as ProjectedSegment
from koch.view.camera import ViewCamera as ViewCamera
