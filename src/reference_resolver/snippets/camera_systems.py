"""Follow, side-scroll, parallax, top-down and zoom cameras for canvas games."""

CAMERA_SYSTEMS_SNIPPET = """
// ===== CAMERA SYSTEMS =====

// --- Smooth Follow Camera (2D) ---
var camera = { x: 0, y: 0 };
var CAMERA_LERP = 0.08; // 0.01 = very smooth/slow, 0.2 = snappy

function updateCamera(player, canvasW, canvasH) {
  var targetX = player.x - canvasW / 2;
  var targetY = player.y - canvasH / 2;
  camera.x += (targetX - camera.x) * CAMERA_LERP;
  camera.y += (targetY - camera.y) * CAMERA_LERP;
}

// Apply camera offset before drawing:
//   ctx.save();
//   ctx.translate(-camera.x, -camera.y);
//   // ... draw all game objects ...
//   ctx.restore();
//   // Draw HUD after restore so it stays fixed on screen

// --- Side-Scrolling Camera (platformers) ---
function updateSideScrollCamera(player, canvasW) {
  camera.x += (player.x - canvasW * 0.3 - camera.x) * CAMERA_LERP;
  if (camera.x < 0) camera.x = 0;
}

// --- Parallax Background Layers ---
var parallaxLayers = [
  { speed: 0.1, color: '#1a1a2e' },  // Sky / distant mountains
  { speed: 0.3, color: '#16213e' },  // Mid-ground
  { speed: 0.6, color: '#0f3460' },  // Foreground
];

function drawParallax(ctx, canvasW, canvasH) {
  parallaxLayers.forEach(function(layer, i) {
    var offsetX = (-camera.x * layer.speed) % 200;
    ctx.fillStyle = layer.color;
    for (var x = offsetX - 200; x < canvasW + 200; x += 200) {
      ctx.fillRect(x, canvasH - 120 - i * 40, 120, 120 + i * 40);
    }
  });
}

// --- Top-Down Camera (RPG, open world) ---
function updateTopDownCamera(player, canvasW, canvasH, worldW, worldH) {
  camera.x = player.x - canvasW / 2;
  camera.y = player.y - canvasH / 2;
  camera.x = Math.max(0, Math.min(camera.x, worldW - canvasW));
  camera.y = Math.max(0, Math.min(camera.y, worldH - canvasH));
}

// --- 3D Chase Camera (Three.js) ---
//   var chaseCamOffset = { x: 0, y: 5, z: 12 };
//   function updateChaseCamera(camera, target) {
//     camera.position.x += (target.position.x + chaseCamOffset.x - camera.position.x) * 0.1;
//     camera.position.y += (target.position.y + chaseCamOffset.y - camera.position.y) * 0.05;
//     camera.position.z = target.position.z + chaseCamOffset.z;
//     camera.lookAt(target.position.x, target.position.y + 1, target.position.z - 20);
//   }

// --- Camera Zoom (dramatic moments) ---
var targetZoom = 1.0;
var currentZoom = 1.0;
function setZoom(z) { targetZoom = z; }
function applyZoom(ctx, canvasW, canvasH) {
  currentZoom += (targetZoom - currentZoom) * 0.05;
  ctx.translate(canvasW / 2, canvasH / 2);
  ctx.scale(currentZoom, currentZoom);
  ctx.translate(-canvasW / 2, -canvasH / 2);
}
"""
