"""Enemy behaviours: patrol, chase, flee, ranged attacks, waves and bosses."""

AI_ENEMIES_SNIPPET = """
// ===== ENEMY AI PATTERNS =====

// --- Patrol (walk back and forth) ---
function updatePatrol(enemy, dt) {
  enemy.x += enemy.speed * enemy.dir * dt;
  if (enemy.x <= enemy.patrolMin || enemy.x >= enemy.patrolMax) {
    enemy.dir *= -1;
  }
}

// --- Chase Player ---
function updateChase(enemy, player, dt) {
  var dx = player.x - enemy.x;
  var dy = player.y - enemy.y;
  var dist = Math.sqrt(dx * dx + dy * dy);
  if (dist > 0 && dist < enemy.detectRange) {
    enemy.x += (dx / dist) * enemy.speed * dt;
    enemy.y += (dy / dist) * enemy.speed * dt;
  }
}

// --- Flee from Player (scared enemies / NPCs) ---
function updateFlee(enemy, player, dt) {
  var dx = enemy.x - player.x;
  var dy = enemy.y - player.y;
  var dist = Math.sqrt(dx * dx + dy * dy);
  if (dist > 0 && dist < enemy.fleeRange) {
    enemy.x += (dx / dist) * enemy.speed * dt;
    enemy.y += (dy / dist) * enemy.speed * dt;
  }
}

// --- Shoot at Player (ranged enemy) ---
function enemyShoot(enemy, player, projectiles) {
  if (Date.now() - enemy.lastShot < enemy.shootCooldown) return;
  var dx = player.x - enemy.x;
  var dy = player.y - enemy.y;
  var dist = Math.sqrt(dx * dx + dy * dy);
  if (dist > enemy.shootRange) return;
  projectiles.push({
    x: enemy.x, y: enemy.y,
    vx: (dx / dist) * 300,
    vy: (dy / dist) * 300,
    hostile: true,
    life: 3.0,
  });
  enemy.lastShot = Date.now();
}

// --- Wave Spawning System ---
var waveNumber = 0;
var enemiesRemaining = 0;

function startWave(enemies, spawnFn) {
  waveNumber++;
  var count = 3 + waveNumber * 2;
  enemiesRemaining = count;
  for (var i = 0; i < count; i++) {
    setTimeout(function() {
      enemies.push(spawnFn(waveNumber));
    }, i * 500);
  }
}

// --- Boss Pattern (phases by HP) ---
//   function updateBoss(boss, player, dt) {
//     var hpPercent = boss.hp / boss.maxHp;
//     if (hpPercent > 0.6) { updatePatrol(boss, dt); }
//     else if (hpPercent > 0.3) { updateChase(boss, player, dt); boss.shootCooldown = 500; }
//     else { updateChase(boss, player, dt); boss.speed *= 1.5; boss.shootCooldown = 200; }
//     enemyShoot(boss, player, projectiles);
//   }

// --- Spawn Helper (random screen edge) ---
function spawnEnemyAtEdge(canvasW, canvasH, speed) {
  var side = Math.floor(Math.random() * 4);
  var e = { w: 30, h: 30, speed: speed || 100, hp: 1, dir: 1 };
  if (side === 0) { e.x = Math.random() * canvasW; e.y = -30; }
  else if (side === 1) { e.x = canvasW + 30; e.y = Math.random() * canvasH; }
  else if (side === 2) { e.x = Math.random() * canvasW; e.y = canvasH + 30; }
  else { e.x = -30; e.y = Math.random() * canvasH; }
  return e;
}
"""
