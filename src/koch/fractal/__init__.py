from koch.fractal.model import FractalModel as FractalModel
