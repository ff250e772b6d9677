from koch.geometry.affine import Affine2D as Affine2D
from koch.geometry.affine import Point as Point
